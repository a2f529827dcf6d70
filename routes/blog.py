"""
Blog Routes Blueprint

Handles the blog listing, individual articles and the not-found page.
The listing state lives entirely in the query string (lang, category, q, page).
"""

from urllib.parse import urlencode

from flask import Blueprint, render_template, redirect, url_for, request, current_app

from extensions import limiter
from models import ViewState
from models.constants import PARAM_PAGE, PARAM_QUERY
from services.listing_service import (
    go_to_page,
    search,
    select_category,
    select_tag,
    switch_language,
    update_params,
)

blog_bp = Blueprint('blog', __name__, url_prefix='/blog')


def blog_rate_limit():
    return current_app.config['BLOG_RATE_LIMIT']


@blog_bp.context_processor
def listing_url_helpers():
    """URL builders for the listing template, all derived from the current query string."""
    def listing_url(params):
        # url_for reserves names such as "endpoint" and "_method"; they must stay query values
        base = url_for('blog.blog_home')
        return f"{base}?{urlencode(params)}" if params else base

    return {
        'language_url': lambda lang: listing_url(switch_language(request.args, lang)),
        'category_url': lambda category: listing_url(select_category(request.args, category)),
        'tag_url': lambda tag: listing_url(select_tag(request.args, tag)),
        'page_url': lambda page: listing_url(go_to_page(request.args, page)),
        'clear_search_url': lambda: listing_url(search(request.args, None)),
        # Hidden fields carried by the search form; q comes from the input
        'search_form_params': lambda: update_params(request.args, {PARAM_QUERY: None, PARAM_PAGE: None}),
    }


@blog_bp.route("")
@limiter.limit(blog_rate_limit)
def blog_home():
    """Blog listing filtered by language, category and search text."""
    blog_service = current_app.extensions['blog_service']
    listing_service = current_app.extensions['listing_service']

    articles = blog_service.load_all()
    state = ViewState.from_params(request.args, current_app.config['SUPPORTED_LANGUAGES'])
    view = listing_service.build_view(articles, state)

    current_app.logger.info(
        f"Blog listing accessed - lang={state.language} category={state.category} "
        f"q='{state.query}' page={state.page}: {view.total_items} match(es), {view.total_pages} page(s)"
    )

    return render_template(
        "blog/index.html",
        state=state,
        view=view,
        languages=current_app.config['SUPPORTED_LANGUAGES'],
    )


@blog_bp.route("/empty")
def empty():
    """Empty-state page shown when an article cannot be found."""
    return render_template("blog/empty.html")


@blog_bp.route("/<slug>")
@limiter.limit(blog_rate_limit)
def article(slug):
    """Display a single rendered article."""
    blog_service = current_app.extensions['blog_service']

    article_data = blog_service.load_one(slug)
    if not article_data:
        current_app.logger.warning(f"Article not found: {slug}")
        return redirect(url_for('blog.empty'))

    rendered = blog_service.render(article_data)
    current_app.logger.info(f"Article accessed: {article_data.slug}")

    return render_template(
        "blog/article.html",
        article=article_data,
        content=rendered.html,
        toc=rendered.toc,
    )
