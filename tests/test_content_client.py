import pytest

from models import PortfolioProfile, Project, ProjectDraft
from utils.content_client import ContentClient, ContentUnavailable, DEFAULT_BACKEND_URL

from conftest import BACKEND_URL, FakeBackend


def test_fetch_profile_returns_model(content_client):
    profile = content_client.fetch_profile()

    assert isinstance(profile, PortfolioProfile)
    assert profile.hero_title == 'Hi, I am Sam'
    assert [s.url for s in profile.socials] == [
        'https://github.com/sam', 'https://sam.dev', 'https://github.com/sam-work']


def test_fetch_profile_fills_missing_social_fields(backend, content_client):
    backend.profile = {'hero_title': 'T', 'hero_subtitle': None, 'about': 'A',
                       'socials': [{'label': 'Mail'}], 'id': 'singleton'}

    profile = content_client.fetch_profile()

    assert profile.hero_subtitle == ''
    assert profile.socials[0].model_dump() == {'label': 'Mail', 'url': '', 'icon': ''}


def test_fetch_projects_keeps_backend_order(backend, content_client):
    backend.projects.reverse()

    projects = content_client.fetch_projects()

    assert [p.id for p in projects] == ['c3', 'b2', 'a1']
    assert all(isinstance(p, Project) for p in projects)


def test_numeric_project_ids_become_text(backend, content_client):
    backend.projects = [{'id': 7, 'title': 'Seven'}]

    assert content_client.fetch_projects()[0].id == '7'


@pytest.mark.parametrize('path, fetch', [
    ('/api/portfolio', 'fetch_profile'),
    ('/api/projects', 'fetch_projects'),
])
@pytest.mark.parametrize('how, reason', [
    ('down', 'transport'),
    (500, 'status'),
    (404, 'status'),
    ('garbage', 'shape'),
])
def test_fetch_failures_raise_content_unavailable(backend, content_client, path, fetch, how, reason):
    backend.fail('GET', path, how)

    with pytest.raises(ContentUnavailable) as excinfo:
        getattr(content_client, fetch)()

    assert excinfo.value.reason == reason
    assert excinfo.value.path == path


def test_profile_that_is_not_an_object_is_rejected(backend, content_client):
    backend.fail('GET', '/api/portfolio', ['not', 'an', 'object'])

    with pytest.raises(ContentUnavailable) as excinfo:
        content_client.fetch_profile()
    assert excinfo.value.reason == 'shape'


def test_projects_that_are_not_a_list_are_rejected(backend, content_client):
    backend.fail('GET', '/api/projects', {'items': []})

    with pytest.raises(ContentUnavailable) as excinfo:
        content_client.fetch_projects()
    assert excinfo.value.reason == 'shape'


def test_project_without_title_is_rejected(backend, content_client):
    backend.projects = [{'id': '1', 'description': 'untitled'}]

    with pytest.raises(ContentUnavailable):
        content_client.fetch_projects()


def test_save_profile_posts_whole_profile(backend, content_client):
    profile = PortfolioProfile(hero_title='New', socials=[{'label': 'X', 'url': 'https://x.com/me'}])

    assert content_client.save_profile(profile) is True

    method, path, body = backend.calls[-1]
    assert (method, path) == ('POST', '/api/admin/portfolio')
    assert body == {
        'hero_title': 'New',
        'hero_subtitle': '',
        'about': '',
        'socials': [{'label': 'X', 'url': 'https://x.com/me', 'icon': ''}],
    }


@pytest.mark.parametrize('how', ['down', 500, 422])
def test_save_profile_reports_failure(backend, content_client, how):
    backend.fail('POST', '/api/admin/portfolio', how)

    assert content_client.save_profile(PortfolioProfile()) is False


def test_create_project_sends_nulls_for_missing_links(backend, content_client):
    draft = ProjectDraft(title='Delta', tags=['go'])

    assert content_client.create_project(draft) is True

    method, path, body = backend.calls[-1]
    assert (method, path) == ('POST', '/api/admin/projects')
    assert body == {'title': 'Delta', 'description': '', 'tags': ['go'],
                    'image_url': None, 'link': None, 'featured': False, 'order': 0}


def test_create_project_never_sends_an_id(backend, content_client):
    content_client.create_project(Project(id='x9', title='Copy'))

    assert 'id' not in backend.calls[-1][2]


def test_create_project_drops_id_from_plain_dict(backend, content_client):
    content_client.create_project({'id': 'x9', 'title': 'Copy', 'tags': ['a']})

    assert backend.calls[-1][2]['title'] == 'Copy'
    assert 'id' not in backend.calls[-1][2]


def test_create_project_failure(backend, content_client):
    backend.fail('POST', '/api/admin/projects', 'down')

    assert content_client.create_project(ProjectDraft(title='Delta')) is False


def test_delete_project(backend, content_client):
    assert content_client.delete_project('b2') is True
    assert backend.calls[-1][:2] == ('DELETE', '/api/admin/projects/b2')
    assert content_client.delete_project('b2') is False


def test_delete_project_quotes_identifier(backend, content_client):
    content_client.delete_project('a/b c')

    assert backend.calls[-1][1] == '/api/admin/projects/a%2Fb%20c'


def test_no_retries(backend, content_client):
    backend.fail('GET', '/api/projects', 'down')

    with pytest.raises(ContentUnavailable):
        content_client.fetch_projects()

    assert len(backend.calls_to('GET', '/api/projects')) == 1


def test_base_url_from_app_config(app):
    client = ContentClient(session=FakeBackend())
    app.config['BACKEND_URL'] = 'http://other.test/'

    client.init_app(app)

    assert client.base_url == 'http://other.test'


def test_explicit_base_url_wins_over_config(app):
    client = ContentClient('http://explicit.test', session=FakeBackend())

    client.init_app(app)

    assert client.base_url == 'http://explicit.test'


def test_default_base_url():
    assert ContentClient().base_url == DEFAULT_BACKEND_URL == 'http://localhost:8000'


def test_app_uses_configured_backend(content_client):
    assert content_client.base_url == BACKEND_URL
