"""
Models package for the portfolio site.

Provides data models for blog articles, the blog listing view and the CV page.
"""
from .article import Article, RenderedArticle, TocEntry
from .view_state import ViewState, FilteredView
from .profile import Hero, Certification, Skill, Company, Experience, Project, Profile
from .constants import Language, SkillFilter

__all__ = [
    'Article',
    'RenderedArticle',
    'TocEntry',
    'ViewState',
    'FilteredView',
    'Hero',
    'Certification',
    'Skill',
    'Company',
    'Experience',
    'Project',
    'Profile',
    'Language',
    'SkillFilter'
]
