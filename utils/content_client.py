"""
Content Client Module - Read/write access to the portfolio content backend

Reads raise ContentUnavailable on any failure so views can fall back to
sample content; writes report a plain success flag. Each call is a single
attempt, there are no retries.
"""

import logging
from typing import List
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from models import PortfolioProfile, Project, ProjectDraft

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = 'http://localhost:8000'

_project_list = TypeAdapter(List[Project])


class ContentClientError(Exception):
    """Base error for content backend access"""


class ContentUnavailable(ContentClientError):
    """
    A read could not produce content

    reason is one of 'transport', 'status' or 'shape'
    """

    def __init__(self, path, reason, detail=''):
        self.path = path
        self.reason = reason
        self.detail = detail
        super().__init__(f"{path}: {reason}{f' ({detail})' if detail else ''}")


class ContentClient:
    """
    Thin access layer for the content backend

    The base URL is fixed at construction or at init_app() time and never
    changes afterwards.
    """

    def __init__(self, base_url=None, session=None, timeout=None):
        self._base_url = base_url.rstrip('/') if base_url else None
        self.session = session or requests.Session()
        self.timeout = timeout

    def init_app(self, app):
        """Bind the client to the app configuration"""
        if self._base_url is None:
            self._base_url = (app.config.get('BACKEND_URL') or DEFAULT_BACKEND_URL).rstrip('/')
        if self.timeout is None:
            self.timeout = app.config.get('BACKEND_TIMEOUT')
        app.extensions['content_client'] = self

    @property
    def base_url(self):
        return self._base_url or DEFAULT_BACKEND_URL

    def _url(self, path):
        return f"{self.base_url}{path}"

    def _get_json(self, path):
        try:
            response = self.session.get(self._url(path), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"GET {path} failed: {str(e)}")
            raise ContentUnavailable(path, 'transport', str(e)) from e

        if not response.ok:
            logger.warning(f"GET {path} returned HTTP {response.status_code}")
            raise ContentUnavailable(path, 'status', str(response.status_code))

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"GET {path} returned invalid JSON")
            raise ContentUnavailable(path, 'shape', 'invalid JSON') from e

    def fetch_profile(self):
        """
        Load the portfolio profile

        Returns:
            PortfolioProfile: Profile as stored on the backend

        Raises:
            ContentUnavailable: On transport, status or shape failure
        """
        path = '/api/portfolio'
        body = self._get_json(path)
        if not isinstance(body, dict):
            logger.warning(f"GET {path} returned {type(body).__name__}, expected object")
            raise ContentUnavailable(path, 'shape', 'expected object')
        try:
            profile = PortfolioProfile.model_validate(body)
        except ValidationError as e:
            logger.warning(f"GET {path} returned malformed profile: {e.error_count()} errors")
            raise ContentUnavailable(path, 'shape', 'invalid profile') from e
        logger.debug(f"Loaded profile with {len(profile.socials)} social links")
        return profile

    def fetch_projects(self):
        """
        Load the project list in backend order

        Returns:
            list[Project]: Projects as stored on the backend

        Raises:
            ContentUnavailable: On transport, status or shape failure
        """
        path = '/api/projects'
        body = self._get_json(path)
        if not isinstance(body, list):
            logger.warning(f"GET {path} returned {type(body).__name__}, expected array")
            raise ContentUnavailable(path, 'shape', 'expected array')
        try:
            projects = _project_list.validate_python(body)
        except ValidationError as e:
            logger.warning(f"GET {path} returned malformed projects: {e.error_count()} errors")
            raise ContentUnavailable(path, 'shape', 'invalid project') from e
        logger.debug(f"Loaded {len(projects)} projects")
        return projects

    def _send(self, method, path, payload=None):
        try:
            response = self.session.request(method, self._url(path), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"{method} {path} failed: {str(e)}")
            return False
        if not response.ok:
            logger.warning(f"{method} {path} returned HTTP {response.status_code}")
            return False
        logger.info(f"{method} {path} succeeded")
        return True

    def save_profile(self, profile):
        """Replace the stored profile with the given one"""
        if not isinstance(profile, PortfolioProfile):
            profile = PortfolioProfile.model_validate(profile)
        return self._send('POST', '/api/admin/portfolio', profile.model_dump(mode='json'))

    def create_project(self, draft):
        """Create a project; the caller re-fetches to learn its id and order"""
        if not isinstance(draft, ProjectDraft):
            draft = ProjectDraft.model_validate(draft)
        payload = draft.model_dump(mode='json', exclude={'id'})
        return self._send('POST', '/api/admin/projects', payload)

    def delete_project(self, project_id):
        """Delete a project by its backend id"""
        return self._send('DELETE', f"/api/admin/projects/{quote(str(project_id), safe='')}")
