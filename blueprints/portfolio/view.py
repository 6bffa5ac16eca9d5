"""
Public portfolio view state

Loads the profile and the project list together; if either read fails the
page shows the built-in sample content instead.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from utils.content_client import ContentUnavailable
from utils.data import get_fallback_profile, get_fallback_projects

logger = logging.getLogger(__name__)


class PublicView:
    """Read-only content for one render of the public page"""

    def __init__(self, client):
        self.client = client
        self.profile = None
        self.projects = []
        self.loading = True
        self.used_fallback = False

    def mount(self):
        """Fetch profile and projects concurrently, falling back on any failure"""
        if not self.loading:
            return self

        with ThreadPoolExecutor(max_workers=2) as pool:
            profile_future = pool.submit(self.client.fetch_profile)
            projects_future = pool.submit(self.client.fetch_projects)
            try:
                profile = profile_future.result()
                projects = projects_future.result()
            except ContentUnavailable as e:
                logger.info(f"Content unavailable, showing sample content: {str(e)}")
                profile = get_fallback_profile()
                projects = get_fallback_projects()
                self.used_fallback = True

        self.profile = profile
        self.projects = projects
        self.loading = False
        return self

    def to_dict(self):
        return {
            'loading': self.loading,
            'fallback': self.used_fallback,
            'profile': self.profile.model_dump(mode='json') if self.profile else None,
            'projects': [p.model_dump(mode='json') for p in self.projects],
        }
