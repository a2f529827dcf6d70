"""
Blog article model.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from .constants import DEFAULT_LANGUAGE, UNCATEGORIZED


@dataclass(frozen=True)
class TocEntry:
    """A heading of a rendered article, used for the table of contents."""
    id: str
    text: str
    level: int


@dataclass(frozen=True)
class RenderedArticle:
    """HTML body of an article plus its table of contents."""
    html: str
    toc: List[TocEntry] = field(default_factory=list)


@dataclass(frozen=True)
class Article:
    """Represents a blog post loaded from a content file.

    Every field is populated at load time; optional front-matter keys are
    replaced by their defaults before construction.
    """
    slug: str
    title: str
    date: str = ""  # Format: YYYY-MM-DD, empty when undated
    read_time: str = ""
    category: str = UNCATEGORIZED
    tags: Tuple[str, ...] = field(default_factory=tuple)
    hero_image: str = ""
    summary: str = ""
    language: str = DEFAULT_LANGUAGE
    body: str = ""

    @property
    def date_obj(self) -> Optional[datetime]:
        """Return datetime object for sorting, or None if the date is unparseable."""
        try:
            return datetime.strptime(self.date, "%Y-%m-%d")
        except (TypeError, ValueError):
            return None

    @property
    def formatted_date(self) -> str:
        """Return human-readable date."""
        date_obj = self.date_obj
        if date_obj is None:
            return self.date
        return date_obj.strftime("%B %d, %Y")
