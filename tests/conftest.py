"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern with clean, isolated test instances. Every
app instance reads its posts and profile data from a temporary directory.
"""

import json
import os
from pathlib import Path

import pytest
import yaml


def write_post(posts_dir: Path, slug: str, meta=None, body: str = "Body text.", ext: str = ".mdx") -> Path:
    """Write a post file with an optional YAML front-matter header."""
    path = posts_dir / f"{slug}{ext}"
    if meta is None:
        path.write_text(body, encoding="utf-8")
    else:
        header = yaml.safe_dump(meta, allow_unicode=True, sort_keys=False)
        path.write_text(f"---\n{header}---\n\n{body}\n", encoding="utf-8")
    return path


def seed_posts(posts_dir: Path):
    """
    Ten English posts (five 'ai', five 'systems') and two Vietnamese posts.

    Systems posts are dated February, ai posts January, so the newest-first
    listing shows all systems posts before the ai posts.
    """
    for i in range(1, 6):
        write_post(posts_dir, f"en-ai-{i}", {
            'title': f"AI Post {i}",
            'date': f"2025-01-0{i}",
            'category': 'ai',
            'tags': ['llm', f"ai-{i}"],
            'summary': f"Summary of ai post {i}.",
            'language': 'en',
        })
        write_post(posts_dir, f"en-systems-{i}", {
            'title': f"Systems Post {i}",
            'date': f"2025-02-0{i}",
            'category': 'systems',
            'tags': ['queues'],
            'summary': f"Summary of systems post {i}.",
        })
    write_post(posts_dir, "vi-hoc-may", {
        'title': "Học Máy Cơ Bản",
        'date': "2025-03-01",
        'category': 'ai',
        'tags': ['học máy'],
        'summary': "Giới thiệu về học máy.",
        'language': 'vi',
    })
    write_post(posts_dir, "vi-duong-ong", {
        'title': "Đường ống dữ liệu",
        'date': "2025-03-02",
        'category': 'hệ thống',
        'summary': "Xây dựng đường ống dữ liệu.",
        'lang': 'vi',
    })


PROFILE_DATA = {
    'hero.json': {
        'name': 'Test Person',
        'title': 'Test Engineer',
        'summary': 'Builds things for tests.',
        'primaryCtaLabel': 'Read the Blog',
        'primaryCtaHref': '/blog',
        'secondaryCtaLabel': 'Contact',
        'secondaryCtaHref': '#contact',
    },
    'skills.json': [
        {'label': 'Python', 'type': 'technical', 'level': 'Advanced'},
        {'label': 'Docker', 'type': 'tool'},
        {'label': 'English', 'type': 'language', 'certified': True,
         'cert': {'issuer': 'IELTS', 'name': 'IELTS Academic', 'score': 7.5}},
        {'label': 'Claimed Cert', 'type': 'technical', 'certified': True},
    ],
    'experience.json': [
        {'title': 'Engineer', 'company': {'name': 'Example Labs', 'link': 'https://example.com'},
         'period': '2023 - Present', 'desc': 'Building things.', 'tech': ['Python']},
        {'title': 'Intern', 'company': 'Acme', 'period': '2022', 'desc': 'Learning things.'},
    ],
    'projects.json': [
        {'title': 'Linked Project', 'desc': 'Has a post.', 'tags': ['ai'], 'image': '', 'blogSlug': 'en-ai-1'},
        {'title': 'Plain Project', 'desc': 'No post.', 'tags': []},
    ],
}


@pytest.fixture
def posts_dir(tmp_path):
    """Posts directory seeded with the standard twelve posts."""
    directory = tmp_path / 'posts'
    directory.mkdir()
    seed_posts(directory)
    return directory


@pytest.fixture
def profile_dir(tmp_path):
    directory = tmp_path / 'profile'
    directory.mkdir()
    for filename, data in PROFILE_DATA.items():
        (directory / filename).write_text(json.dumps(data), encoding='utf-8')
    return directory


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / 'static'
    (directory / 'images' / 'avatars').mkdir(parents=True)
    return directory


@pytest.fixture
def test_config(posts_dir, profile_dir, static_dir):
    """Testing configuration pointed at the temporary content directories."""
    from config import TestingConfig

    class IsolatedTestingConfig(TestingConfig):
        POSTS_DIR = posts_dir
        PROFILE_DIR = profile_dir
        STATIC_DIR = static_dir
        AVATARS_DIR = static_dir / 'images' / 'avatars'
        SITE_OWNER = 'Test Person'

    return IsolatedTestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    os.environ['FLASK_ENV'] = 'testing'

    from app import create_app
    app = create_app(test_config)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture
def blog_service(app):
    """BlogService instance wired by the application factory."""
    return app.extensions['blog_service']


@pytest.fixture
def listing_service():
    """ListingService with the default page size of 8."""
    from services import ListingService
    return ListingService(page_size=8)


@pytest.fixture
def profile_service(app):
    """ProfileService instance wired by the application factory."""
    return app.extensions['profile_service']


@pytest.fixture
def make_article():
    """Factory for Article models with sensible defaults."""
    from models import Article

    def _make(slug, **kwargs):
        kwargs.setdefault('title', slug.replace('-', ' ').title())
        kwargs['tags'] = tuple(kwargs.get('tags', ()))
        return Article(slug=slug, **kwargs)

    return _make


@pytest.fixture
def new_post(posts_dir):
    """Write an extra post into the test posts directory."""
    def _write(slug, meta=None, body="Body text.", ext=".mdx"):
        return write_post(posts_dir, slug, meta, body, ext)
    return _write
