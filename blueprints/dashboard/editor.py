"""
Admin editor state

Holds the local draft of the portfolio profile, the last fetched project
list, the create-project form inputs and the status message for one admin
page load. Backend writes go through the content client; the project list
is re-fetched after a create and trimmed locally after a delete.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from models import PortfolioProfile
from utils.content_client import ContentUnavailable
from utils.helpers import (
    append_social, build_project_draft, is_checked, remove_project,
    update_profile_field, update_social
)
from utils.status import StatusSlot

logger = logging.getLogger(__name__)

STATUS_SAVING = 'Saving...'
STATUS_SAVED = 'Saved!'
STATUS_SAVE_FAILED = 'Failed to save'
STATUS_CREATING = 'Creating project...'
STATUS_CREATED = 'Project created'
STATUS_CREATE_FAILED = 'Failed to create project'
STATUS_DELETING = 'Deleting...'
STATUS_DELETED = 'Deleted'
STATUS_DELETE_FAILED = 'Failed to delete'

PROJECT_FORM_FIELDS = ('title', 'description', 'tags', 'image_url', 'link', 'order')


def blank_project_form():
    return {
        'title': '',
        'description': '',
        'tags': '',
        'image_url': '',
        'link': '',
        'featured': False,
        'order': '0',
    }


class AdminView:
    """
    Editable content for one admin page load

    Args:
        client: ContentClient used for every backend call
        clock: Time source for status message expiry
        status_clear_seconds: Delay before save/create messages clear
        delete_status_clear_seconds: Delay before delete messages clear
    """

    def __init__(self, client, clock=time.monotonic,
                 status_clear_seconds=1.5, delete_status_clear_seconds=1.2):
        self.client = client
        self.status = StatusSlot(clock=clock)
        self.status_clear_seconds = status_clear_seconds
        self.delete_status_clear_seconds = delete_status_clear_seconds
        self.draft = PortfolioProfile()
        self.projects = []
        self.project_form = blank_project_form()
        self.mounted = False
        self._lock = threading.RLock()

    # ---------------- Loading ----------------

    def mount(self):
        """Load profile and projects concurrently, independently of each other"""
        with self._lock:
            self.mounted = True

        with ThreadPoolExecutor(max_workers=2) as pool:
            profile_future = pool.submit(self.client.fetch_profile)
            projects_future = pool.submit(self.client.fetch_projects)

            try:
                profile = profile_future.result()
            except ContentUnavailable as e:
                logger.warning(f"Admin profile load failed: {str(e)}")
            else:
                with self._lock:
                    if self.mounted:
                        self.draft = profile

            try:
                projects = projects_future.result()
            except ContentUnavailable as e:
                logger.warning(f"Admin project load failed: {str(e)}")
            else:
                with self._lock:
                    if self.mounted:
                        self.projects = projects

        return self

    def unmount(self):
        with self._lock:
            self.mounted = False

    # ---------------- Profile draft ----------------

    def edit_field(self, field, value):
        with self._lock:
            self.draft = update_profile_field(self.draft, field, value)
            return self.draft

    def add_social(self):
        with self._lock:
            self.draft = self.draft.model_copy(update={'socials': append_social(self.draft.socials)})
            return self.draft

    def edit_social(self, index, field, value):
        with self._lock:
            self.draft = self.draft.model_copy(
                update={'socials': update_social(self.draft.socials, index, field, value)})
            return self.draft

    def save(self, draft=None):
        """
        Send the whole draft to the backend

        The draft is kept as edited whatever the outcome.

        Args:
            draft (dict, optional): Complete draft as shown in the page;
                replaces the held draft before sending

        Returns:
            bool: True if the backend accepted the profile

        Raises:
            ValueError: draft is not a valid profile; nothing is sent
        """
        if draft is not None:
            draft = PortfolioProfile.model_validate(draft)

        with self._lock:
            if draft is not None:
                self.draft = draft
            snapshot = PortfolioProfile.model_validate(self.draft.model_dump())
            self.status.set(STATUS_SAVING)

        ok = self.client.save_profile(snapshot)

        with self._lock:
            if self.mounted:
                self.status.set(STATUS_SAVED if ok else STATUS_SAVE_FAILED, self.status_clear_seconds)
        return ok

    # ---------------- Projects ----------------

    def create_project(self, form):
        """
        Create a project from form inputs, then reload the project list

        Returns:
            bool: True if the backend created the project
        """
        entered = blank_project_form()
        for field in PROJECT_FORM_FIELDS:
            if field in form:
                value = form.get(field)
                if field == 'tags' and isinstance(value, (list, tuple)):
                    value = ', '.join(str(tag) for tag in value)
                entered[field] = value if value is not None else ''
        entered['featured'] = is_checked(form.get('featured', False))

        with self._lock:
            self.project_form = entered
            self.status.set(STATUS_CREATING)

        try:
            draft = build_project_draft(form)
        except ValueError as e:
            logger.info(f"Project form rejected: {str(e)}")
            ok = False
        else:
            ok = self.client.create_project(draft)

        if not ok:
            with self._lock:
                if self.mounted:
                    self.status.set(STATUS_CREATE_FAILED, self.status_clear_seconds)
            return False

        with self._lock:
            if self.mounted:
                self.status.set(STATUS_CREATED)
                self.project_form = blank_project_form()

        try:
            projects = self.client.fetch_projects()
        except ContentUnavailable as e:
            logger.warning(f"Project list reload after create failed: {str(e)}")
        else:
            with self._lock:
                if self.mounted:
                    self.projects = projects

        with self._lock:
            if self.mounted:
                self.status.set(STATUS_CREATED, self.status_clear_seconds)
        return True

    def delete_project(self, project_id):
        """
        Delete a project and drop it from the local list

        Returns:
            bool: True if the backend deleted the project
        """
        with self._lock:
            self.status.set(STATUS_DELETING)

        ok = self.client.delete_project(project_id)

        with self._lock:
            if not self.mounted:
                return ok
            if ok:
                self.projects = remove_project(self.projects, project_id)
                self.status.set(STATUS_DELETED, self.delete_status_clear_seconds)
            else:
                self.status.set(STATUS_DELETE_FAILED, self.delete_status_clear_seconds)
        return ok

    def to_dict(self):
        with self._lock:
            return {
                'draft': self.draft.model_dump(mode='json'),
                'projects': [p.model_dump(mode='json') for p in self.projects],
                'project_form': dict(self.project_form),
                'status': self.status.message,
            }
