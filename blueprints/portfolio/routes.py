"""
Portfolio Routes - Public portfolio views
Handles: Portfolio page display, read-only content JSON
"""

from flask import render_template, jsonify, current_app
from extensions import get_content_client
from utils.data import get_display_profile
from .view import PublicView
from . import portfolio_bp


@portfolio_bp.route('/')
def index():
    """Public portfolio page"""
    view = PublicView(get_content_client()).mount()
    if view.used_fallback:
        current_app.logger.info("Rendering portfolio with sample content")

    return render_template('index.html',
                           profile=get_display_profile(view.profile),
                           projects=view.projects)


@portfolio_bp.route('/api/content')
def content():
    """Public portfolio content as JSON"""
    view = PublicView(get_content_client()).mount()
    return jsonify(view.to_dict())
