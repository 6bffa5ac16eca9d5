"""
Portfolio Blueprint - Public portfolio views
Handles: Portfolio display with sample-content fallback
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
