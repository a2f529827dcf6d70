"""
Main Routes Blueprint

Handles the CV landing page.
"""

from flask import Blueprint, render_template, request, current_app

from models.constants import SKILL_FILTER_LABELS

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def home():
    """Landing page with hero, skills, experience and projects."""
    profile_service = current_app.extensions['profile_service']

    profile = profile_service.load_profile()
    skill_filter = profile_service.parse_skill_filter(request.args.get('skills'))
    skills = profile_service.filter_skills(profile.skills, skill_filter)

    return render_template(
        "index.html",
        profile=profile,
        skills=skills,
        skill_filter=skill_filter,
        skill_filters=SKILL_FILTER_LABELS,
    )
