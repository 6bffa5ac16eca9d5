import copy
import json

import pytest
import requests

from app import create_app
from utils.content_client import ContentClient

BACKEND_URL = 'http://backend.test'

PROFILE = {
    'hero_title': 'Hi, I am Sam',
    'hero_subtitle': 'Maker of small tools',
    'about': 'Line one.\nLine two.',
    'socials': [
        {'label': 'GitHub', 'url': 'https://github.com/sam', 'icon': 'github'},
        {'label': 'Blog', 'url': 'https://sam.dev', 'icon': 'globe'},
        {'label': 'GitHub', 'url': 'https://github.com/sam-work', 'icon': 'github'},
    ],
}

PROJECTS = [
    {'id': 'a1', 'title': 'Alpha', 'description': 'First', 'tags': ['python'],
     'image_url': None, 'link': 'https://alpha.example', 'featured': True, 'order': 1},
    {'id': 'b2', 'title': 'Beta', 'description': '', 'tags': ['flask', 'htmx'],
     'image_url': 'https://img.example/beta.png', 'link': None, 'featured': False, 'order': 2},
    {'id': 'c3', 'title': 'Gamma', 'description': 'Third', 'tags': [],
     'image_url': None, 'link': None, 'featured': False, 'order': 3},
]


def make_response(status=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status
    response._content = raw if raw is not None else json.dumps(body).encode('utf-8')
    response.headers['Content-Type'] = 'application/json'
    response.encoding = 'utf-8'
    return response


class FakeBackend:
    """
    In-memory stand-in for the content backend, used as the client's session.

    Failures are injected per (method, path): 'down' raises a connection
    error, 'garbage' answers with a non-JSON body, an int answers with that
    HTTP status.
    """

    def __init__(self, base_url=BACKEND_URL):
        self.base_url = base_url
        self.profile = copy.deepcopy(PROFILE)
        self.projects = copy.deepcopy(PROJECTS)
        self.next_id = 100
        self.calls = []
        self.failures = {}

    def fail(self, method, path, how='down'):
        self.failures[(method, path)] = how

    def recover(self, method, path):
        self.failures.pop((method, path), None)

    def calls_to(self, method, path):
        return [c for c in self.calls if c[0] == method and c[1] == path]

    def get(self, url, timeout=None):
        return self.request('GET', url, timeout=timeout)

    def request(self, method, url, json=None, timeout=None):
        assert url.startswith(self.base_url)
        path = url[len(self.base_url):]
        self.calls.append((method, path, copy.deepcopy(json)))

        how = self.failures.get((method, path))
        if how == 'down':
            raise requests.ConnectionError('backend down')
        if how == 'garbage':
            return make_response(raw=b'<html>Bad gateway</html>')
        if isinstance(how, int):
            return make_response(how, {'detail': 'error'})
        if how is not None:
            return make_response(body=how)

        if method == 'GET' and path == '/api/portfolio':
            return make_response(body=self.profile)
        if method == 'GET' and path == '/api/projects':
            return make_response(body=self.projects)
        if method == 'POST' and path == '/api/admin/portfolio':
            self.profile = copy.deepcopy(json)
            return make_response(body={'ok': True})
        if method == 'POST' and path == '/api/admin/projects':
            created = dict(json, id=str(self.next_id))
            self.next_id += 1
            self.projects.append(created)
            return make_response(body={'id': created['id']})
        if method == 'DELETE' and path.startswith('/api/admin/projects/'):
            project_id = path.rsplit('/', 1)[1]
            remaining = [p for p in self.projects if p.get('id') != project_id]
            if len(remaining) == len(self.projects):
                return make_response(404, {'detail': 'Project not found'})
            self.projects = remaining
            return make_response(body={'ok': True})
        return make_response(404, {'detail': 'Not Found'})


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def content_client(backend):
    return ContentClient(BACKEND_URL, session=backend)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(content_client):
    app = create_app('testing', client=content_client)
    yield app


@pytest.fixture
def http(app):
    return app.test_client()
