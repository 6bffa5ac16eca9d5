"""
Utils Package - Centralized utility modules initialization
"""

from .content_client import ContentClient, ContentClientError, ContentUnavailable
from .data import get_fallback_profile, get_fallback_projects, get_display_profile
from .helpers import (
    split_tags,
    new_social_link,
    append_social,
    update_social,
    update_profile_field,
    remove_project,
    build_project_draft,
    social_icon
)
from .registry import EditorRegistry
from .status import StatusSlot

__all__ = [
    # Backend access
    'ContentClient',
    'ContentClientError',
    'ContentUnavailable',

    # Data
    'get_fallback_profile',
    'get_fallback_projects',
    'get_display_profile',

    # Helpers
    'split_tags',
    'new_social_link',
    'append_social',
    'update_social',
    'update_profile_field',
    'remove_project',
    'build_project_draft',
    'social_icon',

    # State
    'EditorRegistry',
    'StatusSlot'
]
