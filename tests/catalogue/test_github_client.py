"""Tests for the GitHub contents client."""

# standard library
import threading
from datetime import UTC, datetime
from unittest.mock import MagicMock

# third-party
import pytest
import requests

# first-party
from steering_cli.catalogue.errors import (
    AuthError,
    ConfigurationError,
    FetchCancelledError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TooDeepError,
)
from steering_cli.catalogue.github_client import GithubClient
from tests.helpers import content_entry, make_response

API = 'https://api.github.com'


def _contents_url(path: str = '') -> str:
    url = f'{API}/repos/o/r/contents'
    return f'{url}/{path}' if path else url


def _client(responses: dict, **kwargs) -> tuple[GithubClient, MagicMock]:
    """Return a client whose session serves responses keyed by URL."""
    session = MagicMock()

    def _get(url, **_):
        response = responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    session.get.side_effect = _get
    return GithubClient(session=session, **kwargs), session


# ==================================================================
# Template Listing
# ==================================================================
class TestFetchTemplates:
    """Tests for GithubClient.fetch_templates()."""

    def test_recursive_listing(self):
        client, session = _client(
            {
                _contents_url(): make_response(
                    payload=[
                        content_entry('a.md'),
                        content_entry('image.png'),
                        content_entry('docs', 'dir'),
                        content_entry('guides', 'dir'),
                    ]
                ),
                _contents_url('docs'): make_response(
                    payload=[content_entry('docs/x.md'), content_entry('docs/api', 'dir')]
                ),
                _contents_url('docs/api'): make_response(payload=[content_entry('docs/api/z.md')]),
                _contents_url('guides'): make_response(payload=[]),
            }
        )

        templates = client.fetch_templates('o', 'r')

        assert [t.path for t in templates] == ['a.md', 'docs/x.md', 'docs/api/z.md']
        assert templates[0].name == 'a'
        assert templates[0].size_bytes == 100
        assert templates[0].sha == 'sha-a.md'
        assert templates[0].download_reference.endswith('/a.md')
        assert session.get.call_count == 4

    def test_root_path_and_branch(self):
        client, session = _client(
            {
                _contents_url('steering'): make_response(
                    payload=[content_entry('steering/a.md'), content_entry('steering/docs', 'dir')]
                ),
                _contents_url('steering/docs'): make_response(
                    payload=[content_entry('steering/docs/b.md')]
                ),
            }
        )

        templates = client.fetch_templates('o', 'r', '/steering/', 'develop')

        assert [t.path for t in templates] == ['a.md', 'docs/b.md']
        assert templates[1].download_reference.endswith('/steering/docs/b.md')
        assert session.get.call_args.kwargs['params'] == {'ref': 'develop'}

    def test_auth_header(self):
        client, session = _client({_contents_url(): make_response(payload=[])})
        client.set_auth_token('secret')

        client.fetch_templates('o', 'r')

        assert session.get.call_args.kwargs['headers'] == {'Authorization': 'Bearer secret'}
        assert client.authenticated is True

        client.clear_auth_token()
        assert client.authenticated is False

    def test_single_markdown_file(self):
        client, _ = _client(
            {_contents_url('guide.md'): make_response(payload=content_entry('guide.md'))}
        )

        templates = client.fetch_templates('o', 'r', 'guide.md')

        assert [t.path for t in templates] == ['guide.md']

    def test_single_file_in_subdirectory_keeps_file_name(self):
        client, _ = _client(
            {
                _contents_url('docs/guide.md'): make_response(
                    payload=content_entry('docs/guide.md')
                )
            }
        )

        templates = client.fetch_templates('o', 'r', 'docs/guide.md')

        assert [t.path for t in templates] == ['guide.md']

    def test_single_non_markdown_file(self):
        client, _ = _client(
            {_contents_url('logo.png'): make_response(payload=content_entry('logo.png'))}
        )

        with pytest.raises(ConfigurationError) as ex:
            client.fetch_templates('o', 'r', 'logo.png')

        assert 'not a markdown file' in ex.value.user_message
        assert ex.value.remediation == 'reconfigure'

    def test_nested_object_payload_is_malformed(self):
        client, _ = _client(
            {
                _contents_url(): make_response(payload=[content_entry('docs', 'dir')]),
                _contents_url('docs'): make_response(payload=content_entry('docs/a.md')),
            }
        )

        with pytest.raises(MalformedResponseError):
            client.fetch_templates('o', 'r')

    @pytest.mark.parametrize(
        'payload',
        [
            'a string',
            [{'name': 'missing fields'}],
            ValueError('Expecting value'),
        ],
    )
    def test_malformed_payload(self, payload):
        client, _ = _client({_contents_url(): make_response(payload=payload)})

        with pytest.raises(MalformedResponseError) as ex:
            client.fetch_templates('o', 'r')

        assert ex.value.kind == 'malformed_response'

    def test_too_deep(self):
        responses = {}
        path = ''
        for index in range(4):
            child = f'{path}/d{index}' if path else f'd{index}'
            responses[_contents_url(path)] = make_response(payload=[content_entry(child, 'dir')])
            path = child
        client, _ = _client(responses, max_depth=2)

        with pytest.raises(TooDeepError) as ex:
            client.fetch_templates('o', 'r')

        assert isinstance(ex.value, MalformedResponseError)
        assert ex.value.details['depth'] == 3

    def test_cancelled_before_request(self):
        client, session = _client({})
        cancel_event = threading.Event()
        cancel_event.set()

        with pytest.raises(FetchCancelledError) as ex:
            client.fetch_templates('o', 'r', cancel_event=cancel_event)

        assert isinstance(ex.value, NetworkError)
        session.get.assert_not_called()

    def test_cancelled_between_directories(self):
        cancel_event = threading.Event()
        root = make_response(payload=[content_entry('docs', 'dir')])
        client, session = _client({_contents_url(): root})

        def _get(url, **_):
            cancel_event.set()
            return root

        session.get.side_effect = _get

        with pytest.raises(FetchCancelledError):
            client.fetch_templates('o', 'r', cancel_event=cancel_event)

        assert session.get.call_count == 1


# ==================================================================
# Error Classification
# ==================================================================
class TestErrorClassification:
    """Tests for HTTP status and transport error classification."""

    @pytest.mark.parametrize(
        'status_code,headers,error_class,remediation',
        [
            (401, {}, AuthError, 're-authenticate'),
            (403, {'X-RateLimit-Remaining': '10'}, AuthError, 're-authenticate'),
            (403, {'X-RateLimit-Remaining': '0'}, RateLimitError, 'wait or configure a token'),
            (429, {}, RateLimitError, 'wait or configure a token'),
            (404, {}, NotFoundError, 'reconfigure'),
            (500, {}, NetworkError, 'retry'),
        ],
    )
    def test_status_codes(self, status_code, headers, error_class, remediation):
        client, _ = _client({_contents_url(): make_response(status_code, headers=headers)})

        with pytest.raises(error_class) as ex:
            client.fetch_templates('o', 'r')

        assert type(ex.value) is error_class
        assert ex.value.remediation == remediation
        assert ex.value.details['status_code'] == status_code

    def test_rate_limit_reset(self):
        headers = {'X-RateLimit-Remaining': '0', 'X-RateLimit-Reset': '1704110400'}
        client, _ = _client({_contents_url(): make_response(403, headers=headers)})

        with pytest.raises(RateLimitError) as ex:
            client.fetch_templates('o', 'r')

        assert ex.value.reset_at == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert ex.value.user_message == 'Rate limit exceeded. Resets at 12:00:00 UTC.'

    def test_timeout(self):
        client, _ = _client({_contents_url(): requests.Timeout('slow')})

        with pytest.raises(NetworkError) as ex:
            client.fetch_templates('o', 'r')

        assert 'timed out' in ex.value.user_message

    def test_connection_error(self):
        client, _ = _client({_contents_url(): requests.ConnectionError('refused')})

        with pytest.raises(NetworkError) as ex:
            client.fetch_templates('o', 'r')

        assert ex.value.kind == 'network'


# ==================================================================
# Other Endpoints
# ==================================================================
class TestOtherEndpoints:
    """Tests for content, validation, and rate limit endpoints."""

    def test_fetch_file_content(self):
        url = 'https://raw.githubusercontent.com/o/r/main/a.md'
        client, _ = _client({url: make_response(text='# Title')})

        assert client.fetch_file_content(url) == '# Title'

    def test_validate_repository(self):
        client, _ = _client({f'{API}/repos/o/r': make_response(payload={})})

        assert client.validate_repository('o', 'r').valid is True

    def test_validate_repository_not_found(self):
        client, _ = _client({f'{API}/repos/o/r': make_response(404)})

        result = client.validate_repository('o', 'r')

        assert result.valid is False
        assert result.status_code == 404
        assert 'not found' in result.error

    def test_rate_limit_status(self):
        payload = {'resources': {'core': {'limit': 60, 'remaining': 42, 'reset': 1704110400}}}
        client, _ = _client({f'{API}/rate_limit': make_response(payload=payload)})

        info = client.rate_limit_status()

        assert info.limit == 60
        assert info.remaining == 42
        assert info.reset == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert info.authenticated is False

    def test_rate_limit_status_defaults(self):
        client, _ = _client({f'{API}/rate_limit': make_response(500)})
        client.set_auth_token('secret')

        info = client.rate_limit_status()

        assert info.limit == 5000
        assert info.remaining == 0
        assert info.authenticated is True

    def test_session_configuration(self):
        client = GithubClient(proxies={'https': 'http://proxy:3128'}, max_retries=2)

        session = client.session

        assert session.headers['Accept'] == 'application/vnd.github.v3+json'
        assert session.headers['User-Agent'].startswith('steering-cli/')
        assert session.proxies == {'https': 'http://proxy:3128'}
        assert session.get_adapter('https://api.github.com').max_retries.total == 2
