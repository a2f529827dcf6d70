"""
Listing Service - Filtering, pagination and facets for the blog listing

Every view of the blog listing is a pure function of the article collection
and the URL query parameters. The helpers at the bottom of this module are
the only way new parameters are produced.
"""

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from models import Article, FilteredView, ViewState
from models.constants import (
    ALL_CATEGORIES,
    DEFAULT_PAGE_SIZE,
    PARAM_CATEGORY,
    PARAM_LANGUAGE,
    PARAM_PAGE,
    PARAM_QUERY,
)
from utils.text import contains_folded


class ListingService:
    """Service computing the visible page of the blog listing."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        """
        Initialize the listing service.

        Args:
            page_size: Number of articles per page (must be positive)
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size

    def partition_by_language(self, articles: Sequence[Article], language: str) -> List[Article]:
        """Keep only articles written in the given language."""
        return [a for a in articles if a.language == language]

    def matches_category(self, article: Article, category: str) -> bool:
        return category == ALL_CATEGORIES or article.category == category

    def matches_query(self, article: Article, query: str) -> bool:
        """
        Check whether the query occurs in the title or summary.

        Matching is case-insensitive with full Unicode folding, so
        "việt" matches "VIỆT". Tags and category are not searched.
        """
        if not query:
            return True
        return contains_folded(article.title, query) or contains_folded(article.summary, query)

    def filter_articles(self, articles: Sequence[Article], state: ViewState) -> List[Article]:
        """
        Apply the category and text filters of a view state.

        Args:
            articles: Articles of a single language partition
            state: Current view state

        Returns:
            Matching articles in their original order
        """
        return [
            a for a in articles
            if self.matches_category(a, state.category) and self.matches_query(a, state.query)
        ]

    def count_pages(self, total_items: int) -> int:
        return math.ceil(total_items / self.page_size) if total_items > 0 else 0

    def paginate(self, items: Sequence[Article], page: int) -> Tuple[List[Article], int]:
        """
        Slice one page out of a filtered sequence.

        Pages past the end yield an empty slice rather than an error.

        Args:
            items: Filtered articles
            page: 1-based page number

        Returns:
            Tuple of (articles on the page, total page count)
        """
        page = max(1, page)
        start = (page - 1) * self.page_size
        return list(items[start:start + self.page_size]), self.count_pages(len(items))

    def derive_categories(self, articles: Sequence[Article]) -> List[str]:
        """Return 'all' followed by distinct categories in first-seen order."""
        categories = [ALL_CATEGORIES]
        for article in articles:
            if article.category and article.category not in categories:
                categories.append(article.category)
        return categories

    def derive_tags(self, articles: Sequence[Article]) -> List[str]:
        """Return distinct tags in first-seen order."""
        tags = []
        for article in articles:
            for tag in article.tags:
                if tag and tag not in tags:
                    tags.append(tag)
        return tags

    def build_view(self, articles: Sequence[Article], state: ViewState) -> FilteredView:
        """
        Compute the filtered, paginated view for a view state.

        Facets are derived from the language partition, not from the
        filtered result, so the category list does not shrink while a
        filter is active.

        Args:
            articles: Full article collection
            state: View state parsed from the URL

        Returns:
            FilteredView for the requested page
        """
        partition = self.partition_by_language(articles, state.language)
        filtered = self.filter_articles(partition, state)
        items, total_pages = self.paginate(filtered, state.page)

        return FilteredView(
            items=tuple(items),
            total_items=len(filtered),
            total_pages=total_pages,
            page=state.page,
            page_size=self.page_size,
            categories=tuple(self.derive_categories(partition)),
            tags=tuple(self.derive_tags(partition)),
        )


# ========== URL PARAMETER MUTATIONS ==========

def update_params(current: Mapping, changes: Mapping) -> Dict[str, str]:
    """
    Merge parameter changes into the current query parameters.

    A falsy value or the 'all' sentinel removes the parameter; any other
    value is stored as its string form. Parameters not mentioned in
    changes are kept as they are.

    Args:
        current: Current query parameters (e.g. request.args)
        changes: Mapping of parameter name to new value

    Returns:
        New parameter dictionary; current is left untouched
    """
    params = {key: str(value) for key, value in current.items()}

    for key, value in changes.items():
        if not value or value == ALL_CATEGORIES:
            params.pop(key, None)
        else:
            params[key] = str(value)

    return params


def switch_language(current: Mapping, language: str) -> Dict[str, str]:
    """Switching language resets category, search and page."""
    return update_params(current, {
        PARAM_LANGUAGE: language,
        PARAM_CATEGORY: ALL_CATEGORIES,
        PARAM_QUERY: "",
        PARAM_PAGE: 1,
    })


def select_category(current: Mapping, category: str) -> Dict[str, str]:
    return update_params(current, {PARAM_CATEGORY: category, PARAM_PAGE: 1})


def search(current: Mapping, query: Optional[str]) -> Dict[str, str]:
    """A new search always starts from the first page."""
    return update_params(current, {PARAM_QUERY: query, PARAM_PAGE: 1})


def select_tag(current: Mapping, tag: str) -> Dict[str, str]:
    """Clicking a tag searches for its text across all categories."""
    return update_params(current, {
        PARAM_QUERY: tag,
        PARAM_CATEGORY: ALL_CATEGORIES,
        PARAM_PAGE: 1,
    })


def go_to_page(current: Mapping, page: int) -> Dict[str, str]:
    return update_params(current, {PARAM_PAGE: page})
