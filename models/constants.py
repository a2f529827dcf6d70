"""
Centralized constants for the blog listing and CV page.
"""

from enum import Enum


class Language(Enum):
    EN = "en"
    VI = "vi"


DEFAULT_LANGUAGE = Language.EN.value

# Category sentinel meaning "no category filter"
ALL_CATEGORIES = "all"

# Fallback for posts without a category in their front-matter
UNCATEGORIZED = "uncategorized"

# Query parameter names of the blog listing URL
PARAM_LANGUAGE = "lang"
PARAM_CATEGORY = "category"
PARAM_QUERY = "q"
PARAM_PAGE = "page"

DEFAULT_PAGE_SIZE = 8

# Average reading speed used when a post has no readTime
WORDS_PER_MINUTE = 200


class SkillFilter(Enum):
    ALL = "all"
    CERTIFIED = "certified"
    TECHNICAL = "technical"
    TOOL = "tool"
    LANGUAGE = "language"


SKILL_FILTER_LABELS = {
    SkillFilter.ALL: "All",
    SkillFilter.CERTIFIED: "Certified",
    SkillFilter.TECHNICAL: "Technical",
    SkillFilter.TOOL: "Tools",
    SkillFilter.LANGUAGE: "Languages",
}
