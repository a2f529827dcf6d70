"""
Validation Schemas Package

Contains Pydantic models for content validation and normalization.
"""

from .front_matter import PostFrontMatter, validate_front_matter
from .profile import HeroSchema, SkillSchema, ExperienceSchema, ProjectSchema

__all__ = [
    'PostFrontMatter',
    'validate_front_matter',
    'HeroSchema',
    'SkillSchema',
    'ExperienceSchema',
    'ProjectSchema'
]
