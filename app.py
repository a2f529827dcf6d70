"""
Portfolio & Blog - CV landing page and a bilingual Markdown blog
"""
from flask import Flask, render_template, request
from datetime import datetime
import os
from config import get_config
from extensions import limiter
from routes import main_bp, blog_bp
from services import BlogService, ListingService, ProfileService
from utils.logger import setup_logger


def create_app(config_class=None):
    """
    Application factory.

    Args:
        config_class: Configuration class; defaults to the one selected by FLASK_ENV

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    if app.config.get('REQUIRE_EXPLICIT_SECRET_KEY') and not os.environ.get('SECRET_KEY'):
        raise ValueError(
            "SECRET_KEY must be explicitly set in production!\n"
            "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )

    setup_logger(app)
    limiter.init_app(app)

    register_services(app)
    register_template_helpers(app)
    app.register_blueprint(main_bp)
    app.register_blueprint(blog_bp)
    register_error_handlers(app)
    register_security_headers(app)

    @app.route('/health')
    def health_check():
        return {'status': 'ok'}, 200

    return app


def register_services(app):
    """Instantiate services from configuration and attach them to the app."""
    app.extensions['blog_service'] = BlogService(
        app.config['POSTS_DIR'],
        extensions=app.config['POST_EXTENSIONS'],
        markdown_extras=app.config['MARKDOWN_EXTRAS'],
    )
    app.extensions['listing_service'] = ListingService(page_size=app.config['POSTS_PER_PAGE'])
    app.extensions['profile_service'] = ProfileService(
        app.config['PROFILE_DIR'],
        avatars_dir=app.config['AVATARS_DIR'],
        static_dir=app.config['STATIC_DIR'],
    )


def format_date(date_string):
    """Format date string for Jinja templates; unparseable dates are shown as-is."""
    if not date_string:
        return ""
    try:
        date_obj = datetime.strptime(date_string, "%Y-%m-%d")
    except ValueError:
        return date_string
    return date_obj.strftime("%B %d, %Y")


def register_template_helpers(app):
    app.jinja_env.globals["format_date"] = format_date

    @app.context_processor
    def inject_site():
        return {
            'site_owner': app.config['SITE_OWNER'],
            'contact_email': app.config['CONTACT_EMAIL'],
            'contact_links': app.config['CONTACT_LINKS'],
            'current_year': datetime.now().year,
        }


def register_error_handlers(app):
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template("404.html"), 404

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.error(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
        return render_template("500.html"), 500


def register_security_headers(app):
    @app.after_request
    def set_security_headers(response):
        """Apply security headers to all responses."""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['X-XSS-Protection'] = '1; mode=block'

        if request.is_secure:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data: https:; "
            "font-src 'self'; "
            "connect-src 'self'; "
            "frame-ancestors 'self'; "
            "base-uri 'self'; "
            "form-action 'self'"
        )

        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

        return response


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info(f"Environment: {env_name} - Debug Mode: {debug_mode}")
    if debug_mode and env_name == 'production':
        app.logger.warning("Debug mode enabled in production! Set FLASK_DEBUG=false")

    # Get host and port from environment or use defaults
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
