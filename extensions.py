"""
Extensions Module - Centralized initialization of shared services
Decouples the backend client and the editor registry from app.py to avoid
circular imports and enable better testing.

Each app owns its own client and registry, so tests can point distinct apps
at distinct backends.
"""

from flask import current_app
from utils.content_client import ContentClient
from utils.registry import EditorRegistry


def init_extensions(app, client=None):
    """Bind a content client and an editor registry to the app"""
    client = client or ContentClient()
    client.init_app(app)
    app.extensions['editors'] = EditorRegistry()
    return client


def get_content_client():
    return current_app.extensions['content_client']


def get_editors():
    return current_app.extensions['editors']


__all__ = ['init_extensions', 'get_content_client', 'get_editors']
