"""
Blog listing view state and the filtered view derived from it.
"""
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from .article import Article
from .constants import (
    ALL_CATEGORIES,
    DEFAULT_LANGUAGE,
    Language,
    PARAM_CATEGORY,
    PARAM_LANGUAGE,
    PARAM_PAGE,
    PARAM_QUERY,
)


def parse_page(value) -> int:
    """Parse a 1-based page number, falling back to 1."""
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def parse_language(value, supported: Optional[Sequence[str]] = None) -> str:
    """Return the language if supported, else the default language."""
    if supported is None:
        supported = [lang.value for lang in Language]
    if isinstance(value, str) and value.strip().lower() in supported:
        return value.strip().lower()
    return DEFAULT_LANGUAGE


@dataclass(frozen=True)
class ViewState:
    """Current filter and pagination selection of the blog listing.

    Built from the URL query string on every request; never mutated.
    """
    language: str = DEFAULT_LANGUAGE
    category: str = ALL_CATEGORIES
    query: str = ""
    page: int = 1

    @classmethod
    def from_params(cls, params: Mapping, supported_languages: Optional[Sequence[str]] = None) -> 'ViewState':
        """
        Reconstruct the view state from URL query parameters.

        Args:
            params: Mapping of query parameter name to value (e.g. request.args)
            supported_languages: Languages accepted for the lang parameter

        Returns:
            ViewState with every missing or malformed value replaced by its default
        """
        category = params.get(PARAM_CATEGORY) or ALL_CATEGORIES
        query = params.get(PARAM_QUERY) or ""
        return cls(
            language=parse_language(params.get(PARAM_LANGUAGE), supported_languages),
            category=str(category).strip() or ALL_CATEGORIES,
            query=str(query).strip(),
            page=parse_page(params.get(PARAM_PAGE)),
        )

    @property
    def is_filtered(self) -> bool:
        """True when a category or text filter is active."""
        return self.category != ALL_CATEGORIES or bool(self.query)


@dataclass(frozen=True)
class FilteredView:
    """One page of articles matching a ViewState, plus the facets of its language."""
    items: Tuple[Article, ...]
    total_items: int
    total_pages: int
    page: int
    page_size: int
    categories: Tuple[str, ...] = field(default_factory=tuple)
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_previous(self) -> bool:
        return self.page > 1 and self.total_pages > 0

    @property
    def previous_page(self) -> int:
        """Page behind the "previous" link; past the end it is the last page."""
        return min(self.page - 1, self.total_pages)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def page_numbers(self) -> List[int]:
        """Return the list of page numbers for pagination controls."""
        return list(range(1, self.total_pages + 1))

    @property
    def is_empty(self) -> bool:
        return not self.items
