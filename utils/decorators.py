"""
Decorators Module - Admin editor lookup for dashboard routes
"""

from functools import wraps
from flask import session, jsonify


def editor_required(f):
    """Decorator to resolve the session's mounted editor, or answer 409"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from extensions import get_editors

        editor = get_editors().get(session.get('editor_id'))
        if editor is None or not editor.mounted:
            return jsonify({'error': 'editor not loaded'}), 409
        return f(editor, *args, **kwargs)
    return decorated_function
