"""
Dashboard Blueprint - Admin content editor
Handles: Profile draft editing, social links, project creation and deletion
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/admin')

from . import routes
