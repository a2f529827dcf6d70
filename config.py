"""
Application configuration with environment-specific settings.

Usage:
    from config import get_config
    app.config.from_object(get_config())
"""
import os
import secrets
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the application
BASE_DIR = Path(__file__).parent.resolve()


class Config:
    """Base configuration with common settings."""

    # Security
    # Development falls back to a per-process key; production validates in create_app
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Session configuration
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 3600  # 1 hour

    # Path configuration
    POSTS_DIR = Path(os.environ.get('POSTS_DIR', BASE_DIR / 'content' / 'posts'))
    POST_EXTENSIONS = ('.mdx', '.md')
    PROFILE_DIR = Path(os.environ.get('PROFILE_DIR', BASE_DIR / 'profile'))
    STATIC_DIR = BASE_DIR / 'static'
    TEMPLATES_DIR = BASE_DIR / 'templates'
    AVATARS_DIR = STATIC_DIR / 'images' / 'avatars'

    # Blog settings
    POSTS_PER_PAGE = int(os.environ.get('POSTS_PER_PAGE', 8))
    DEFAULT_LANGUAGE = 'en'
    SUPPORTED_LANGUAGES = ('en', 'vi')
    MARKDOWN_EXTRAS = [
        'fenced-code-blocks',
        'tables',
        'header-ids',
        'strike',
        'task_list',
        'smarty-pants',
    ]

    # Site owner
    SITE_OWNER = os.environ.get('SITE_OWNER', 'Than Huynh Van')
    CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL', 'hthan401@gmail.com')
    CONTACT_LINKS = {
        'github': os.environ.get('GITHUB_URL', 'https://github.com/'),
        'linkedin': os.environ.get('LINKEDIN_URL', 'https://www.linkedin.com/'),
    }

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    BLOG_RATE_LIMIT = os.environ.get('BLOG_RATE_LIMIT', '60 per minute')

    # Application settings
    JSON_SORT_KEYS = False
    JSON_AS_ASCII = False


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False  # Allow HTTP in development

    # Development-specific settings
    EXPLAIN_TEMPLATE_LOADING = False
    SEND_FILE_MAX_AGE_DEFAULT = 0  # Disable caching for development


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True  # Require HTTPS

    # Production-specific settings
    PREFERRED_URL_SCHEME = 'https'

    # create_app refuses to start without an explicit key
    REQUIRE_EXPLICIT_SECRET_KEY = True


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = False
    TESTING = True
    SESSION_COOKIE_SECURE = False
    RATELIMIT_ENABLED = False


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses FLASK_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])
