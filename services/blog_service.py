"""
Blog Service - Content repository for blog posts

Loads Markdown posts with a YAML front-matter header from the posts
directory, normalizes their metadata into Article records, and renders
post bodies to HTML.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import markdown2
import yaml
from bs4 import BeautifulSoup
from flask import current_app

from models import Article, RenderedArticle, TocEntry
from schemas import validate_front_matter
from utils.text import calculate_reading_time

FRONT_MATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
SLUG_RE = re.compile(r'^[\w\-\.]+$')

DEFAULT_MARKDOWN_EXTRAS = ['fenced-code-blocks', 'tables', 'header-ids']


class BlogService:
    """Read-only repository of blog posts stored as content files."""

    def __init__(self, posts_dir: Path, extensions: Sequence[str] = ('.mdx', '.md'),
                 markdown_extras: Optional[List[str]] = None):
        """
        Initialize the blog service.

        Args:
            posts_dir: Path to the directory containing post files
            extensions: Accepted file extensions, in order of preference
            markdown_extras: markdown2 extras used when rendering bodies
        """
        self.posts_dir = Path(posts_dir).resolve()
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.markdown_extras = list(markdown_extras or DEFAULT_MARKDOWN_EXTRAS)

    # ---------- storage ----------

    def get_post_files(self) -> List[Path]:
        """
        List post files in the posts directory.

        Returns:
            Paths sorted by slug, preferred extension first; empty if the
            directory does not exist
        """
        if not self.posts_dir.is_dir():
            return []
        return sorted(
            (p for p in self.posts_dir.iterdir()
             if p.is_file() and p.suffix.lower() in self.extensions),
            key=lambda p: (p.stem, self.extensions.index(p.suffix.lower())),
        )

    def slug_for(self, path: Path) -> str:
        """The slug of a post is its file name without the extension."""
        return path.stem

    def resolve_post_path(self, slug: str) -> Optional[Path]:
        """
        Find the file backing a slug.

        Tries an exact file name first, then a case-insensitive scan of the
        directory. The scan is linear in the number of posts.

        Args:
            slug: Requested post identifier

        Returns:
            Path of the post file, or None if not found/invalid
        """
        # Only allow alphanumeric, dash, underscore, and dot
        if not slug or not isinstance(slug, str) or not SLUG_RE.match(slug):
            return None

        for ext in self.extensions:
            candidate = (self.posts_dir / f"{slug}{ext}").resolve()
            # Ensure the resolved path is still within the posts directory
            try:
                candidate.relative_to(self.posts_dir)
            except ValueError:
                return None
            if candidate.is_file() and candidate.stem == slug:
                return candidate

        wanted = slug.lower()
        for path in self.get_post_files():
            if self.slug_for(path).lower() == wanted:
                return path

        return None

    # ---------- parsing ----------

    def split_front_matter(self, raw: str) -> Tuple[Optional[dict], str]:
        """
        Split a post into its front-matter mapping and Markdown body.

        Args:
            raw: Full file contents

        Returns:
            Tuple of (parsed header or None, body)

        Raises:
            ValueError: If the header is not valid YAML
        """
        match = FRONT_MATTER_RE.match(raw)
        if not match:
            return None, raw

        try:
            data = yaml.safe_load(match.group(1))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML front-matter: {e}")

        return data, raw[match.end():]

    def parse_post(self, slug: str, raw: str) -> Article:
        """
        Build an Article from raw file contents.

        Missing metadata is replaced by defaults: title -> slug,
        category -> 'uncategorized', summary -> '', tags -> (),
        language -> 'en', readTime -> estimate from the body.

        Raises:
            ValueError: If the front-matter cannot be parsed or validated
        """
        data, body = self.split_front_matter(raw)
        meta = validate_front_matter(data)

        read_time = meta.read_time or f"{calculate_reading_time(body)} min read"

        return Article(
            slug=slug,
            title=meta.title or slug,
            date=meta.date,
            read_time=read_time,
            category=meta.category,
            tags=tuple(meta.tags),
            hero_image=meta.hero_image,
            summary=meta.summary,
            language=meta.language,
            body=body.strip(),
        )

    def read_post(self, path: Path) -> Optional[Article]:
        """
        Read and parse a single post file.

        Returns:
            Article, or None if the file cannot be read or parsed
        """
        try:
            raw = path.read_text(encoding="utf-8-sig")
        except (FileNotFoundError, PermissionError, UnicodeDecodeError) as e:
            current_app.logger.warning(f"Could not read post {path.name}: {e}")
            return None

        try:
            return self.parse_post(self.slug_for(path), raw)
        except ValueError as e:
            current_app.logger.warning(f"Skipping post {path.name}: {e}")
            return None

    # ---------- repository ----------

    def load_all(self) -> List[Article]:
        """
        Load every post from the posts directory.

        The directory is read on each call. A missing directory yields an
        empty list; unreadable posts are skipped.

        Returns:
            Articles sorted newest first, undated posts last
        """
        articles: Dict[str, Article] = {}
        seen = set()

        for path in self.get_post_files():
            slug = self.slug_for(path)
            # The preferred extension owns the slug even when it fails to parse
            if slug in seen:
                current_app.logger.warning(f"Duplicate slug '{slug}' ignored: {path.name}")
                continue
            seen.add(slug)
            article = self.read_post(path)
            if article is not None:
                articles[slug] = article

        return self.sort_by_date(articles.values())

    def load_one(self, slug: str) -> Optional[Article]:
        """
        Load a single post by slug, matching case-insensitively as a fallback.

        Args:
            slug: Requested post identifier

        Returns:
            Article, or None if no post matches
        """
        path = self.resolve_post_path(slug)
        if path is None:
            return None
        return self.read_post(path)

    def sort_by_date(self, articles) -> List[Article]:
        """Sort articles newest first; posts without a parseable date go last."""
        dated = [a for a in articles if a.date_obj is not None]
        undated = [a for a in articles if a.date_obj is None]
        dated.sort(key=lambda a: a.date_obj, reverse=True)
        return dated + undated

    # ---------- rendering ----------

    def render(self, article: Article) -> RenderedArticle:
        """
        Render an article body to HTML.

        Headings get anchor links and feed the table of contents, images are
        lazy loaded and external links open in a new tab.

        Args:
            article: Article to render

        Returns:
            RenderedArticle with HTML and table of contents
        """
        html = markdown2.markdown(article.body, extras=self.markdown_extras)
        soup = BeautifulSoup(str(html), 'html.parser')

        toc = []
        used_ids = set()
        for heading in soup.find_all(['h1', 'h2', 'h3', 'h4']):
            heading_id = heading.get('id') or self.make_anchor(heading.get_text(), used_ids)
            used_ids.add(heading_id)
            heading['id'] = heading_id

            anchor = soup.new_tag('a', href=f"#{heading_id}")
            anchor['class'] = 'heading-anchor'
            for child in list(heading.contents):
                anchor.append(child.extract())
            heading.append(anchor)

            if heading.name in ('h2', 'h3'):
                toc.append(TocEntry(id=heading_id, text=heading.get_text(strip=True), level=int(heading.name[1])))

        for img in soup.find_all('img'):
            img['loading'] = 'lazy'
            if not img.get('alt'):
                img['alt'] = article.title

        for link in soup.find_all('a', href=True):
            if link['href'].startswith(('http://', 'https://')):
                link['target'] = '_blank'
                link['rel'] = 'noopener noreferrer'

        return RenderedArticle(html=str(soup), toc=toc)

    def make_anchor(self, text: str, used_ids: set) -> str:
        """Build a unique heading id from its text."""
        base = re.sub(r'[^\w\s-]', '', text.lower()).strip()
        base = re.sub(r'[\s_-]+', '-', base) or 'section'
        anchor, n = base, 2
        while anchor in used_ids:
            anchor = f"{base}-{n}"
            n += 1
        return anchor
