"""
Front-Matter Validation Schema

Pydantic model that normalizes the YAML header of a blog post.
Every optional key receives its documented default here, so the rest of the
application never has to check for missing metadata.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.constants import DEFAULT_LANGUAGE, Language, UNCATEGORIZED


class PostFrontMatter(BaseModel):
    """
    Validation schema for a post's front-matter.

    Accepts the camelCase keys used in content files (readTime, heroImage) and
    both `language` and `lang` for the language tag.
    """
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True, extra='ignore')

    title: Optional[str] = None
    date: str = ""
    read_time: str = Field(default="", validation_alias=AliasChoices('readTime', 'read_time'))
    category: str = UNCATEGORIZED
    tags: List[str] = Field(default_factory=list)
    hero_image: str = Field(default="", validation_alias=AliasChoices('heroImage', 'hero_image'))
    summary: str = ""
    language: str = Field(default=DEFAULT_LANGUAGE, validation_alias=AliasChoices('language', 'lang'))

    @field_validator('title', mode='before')
    @classmethod
    def coerce_title(cls, v):
        """Blank titles are treated as missing."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator('read_time', 'hero_image', 'summary', mode='before')
    @classmethod
    def coerce_text(cls, v) -> str:
        """Missing text fields become empty strings; scalars become text."""
        if v is None:
            return ""
        return str(v)

    @field_validator('date', mode='before')
    @classmethod
    def normalize_date(cls, v) -> str:
        """YAML parses bare dates into date objects; store them as ISO strings."""
        if v is None:
            return ""
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        return str(v)

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v) -> str:
        """Empty categories fall back to 'uncategorized'."""
        if v is None:
            return UNCATEGORIZED
        v = str(v).strip()
        return v or UNCATEGORIZED

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v) -> List[str]:
        """Accept a list or a comma separated string; drop blanks and duplicates."""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(',')
        elif not isinstance(v, (list, tuple, set)):
            return []

        tags = []
        for tag in v:
            if tag is None:
                continue
            tag = str(tag).strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags

    @field_validator('language', mode='before')
    @classmethod
    def normalize_language(cls, v) -> str:
        """Only supported languages are kept; anything else is English."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v in {lang.value for lang in Language}:
                return v
        return DEFAULT_LANGUAGE


def validate_front_matter(data) -> PostFrontMatter:
    """
    Validate and normalize a parsed front-matter mapping.

    Args:
        data: Parsed YAML header (None when the header is empty)

    Returns:
        Validated PostFrontMatter instance

    Raises:
        ValueError: If the header is not a mapping or fails validation
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Front-matter must be a mapping, got {type(data).__name__}")
    try:
        return PostFrontMatter.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid front-matter: {str(e)}")
