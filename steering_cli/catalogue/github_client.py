"""Steering CLI Module"""

# standard library
import logging
import threading
from datetime import UTC, datetime
from functools import cached_property
from urllib.parse import quote

# third-party
import requests
from pydantic import ValidationError
from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# first-party
from steering_cli.__metadata__ import __version__
from steering_cli.catalogue.errors import (
    AuthError,
    CatalogueError,
    ConfigurationError,
    FetchCancelledError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TooDeepError,
)
from steering_cli.catalogue.model.github_content_model import GithubContentModel
from steering_cli.catalogue.model.github_status_model import (
    RateLimitInfoModel,
    ValidationResultModel,
)
from steering_cli.catalogue.model.template_metadata_model import (
    TEMPLATE_EXTENSION,
    TemplateMetadataModel,
)

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

DEFAULT_API_URL = 'https://api.github.com'


class GithubClient:
    """Read-only client for the GitHub contents API.

    Lists every markdown template under a repository path by walking the
    directory structure with an explicit worklist (one request per directory).
    HTTP failures are classified into the errors defined in
    ``steering_cli.catalogue.errors`` so callers never see a raw transport
    exception.

    Transport errors (connect/read) are retried by the session adapter with
    exponential backoff. HTTP status failures are never retried.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30,
        max_retries: int = 3,
        max_depth: int = 32,
        proxies: dict[str, str] | None = None,
        session: Session | None = None,
    ):
        """Initialize instance properties."""
        self.api_url = api_url.rstrip('/')
        self.max_depth = max_depth
        self.max_retries = max_retries
        self.proxies = proxies or {}
        self.timeout = timeout
        self._token: str | None = None

        if session is not None:
            self.__dict__['session'] = session

    @cached_property
    def session(self) -> Session:
        """Return a requests Session configured with proxies and transport retries."""
        session = Session()
        session.headers.update(
            {
                'Accept': 'application/vnd.github.v3+json',
                'User-Agent': f'steering-cli/{__version__}',
            }
        )
        session.proxies = self.proxies

        retry = Retry(
            total=self.max_retries,
            connect=self.max_retries,
            read=self.max_retries,
            status=0,
            backoff_factor=1,
            allowed_methods=frozenset(['GET']),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount('https://', adapter)
        session.mount('http://', adapter)
        return session

    @property
    def authenticated(self) -> bool:
        """Return True if an auth token is set."""
        return self._token is not None

    def set_auth_token(self, token: str | None):
        """Set the token sent with every request."""
        self._token = token or None

    def clear_auth_token(self):
        """Clear the auth token."""
        self._token = None

    # ==================================================================
    # Template Listing
    # ==================================================================

    def fetch_templates(
        self,
        owner: str,
        repo: str,
        root_path: str | None = None,
        branch: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[TemplateMetadataModel]:
        """Return every markdown template under root_path, depth-first.

        Directories are processed from a LIFO worklist so the traversal never
        recurses. The cancel event is checked before each directory request;
        when set, FetchCancelledError is raised and no partial result escapes.
        """
        root = (root_path or '').strip('/')
        templates: list[TemplateMetadataModel] = []
        visited: set[str] = set()
        worklist: list[tuple[str, int]] = [(root, 0)]

        while worklist:
            path, depth = worklist.pop()

            if cancel_event is not None and cancel_event.is_set():
                raise FetchCancelledError(
                    f'action=fetch-templates, owner={owner}, repo={repo}, path={path}, '
                    'fetch cancelled'
                )

            if depth > self.max_depth:
                raise TooDeepError(
                    f'action=fetch-templates, owner={owner}, repo={repo}, path={path}, '
                    f'depth={depth} exceeds max-depth={self.max_depth}',
                    details={'path': path, 'depth': depth},
                )

            if path in visited:
                _logger.warning(f'action=fetch-templates, duplicate-directory={path}')
                continue
            visited.add(path)

            payload = self._list_directory(owner, repo, path, branch)

            # a path that points directly at a file returns a single object
            if isinstance(payload, dict):
                if depth == 0:
                    return [self._single_file_template(payload, path)]
                raise MalformedResponseError(
                    f'action=fetch-templates, path={path}, expected a directory listing'
                )

            if not isinstance(payload, list):
                raise MalformedResponseError(
                    f'action=fetch-templates, path={path}, '
                    f'unexpected payload type={type(payload).__name__}'
                )

            sub_directories = []
            for item in payload:
                entry = self._content(item, path)
                if entry.is_file and entry.name.endswith(TEMPLATE_EXTENSION):
                    templates.append(self._to_template(entry, root))
                elif entry.is_dir:
                    sub_directories.append(entry.path)

            # reversed so the first listed directory is popped next
            worklist.extend((sub, depth + 1) for sub in reversed(sub_directories))

        _logger.info(
            f'action=fetch-templates, owner={owner}, repo={repo}, path={root or "/"}, '
            f'directories={len(visited)}, templates={len(templates)}'
        )
        return templates

    def _list_directory(self, owner: str, repo: str, path: str, branch: str | None):
        """Return the decoded contents API payload for a path."""
        url = f'{self.api_url}/repos/{owner}/{repo}/contents'
        if path:
            url = f'{url}/{quote(path)}'

        params = {'ref': branch} if branch else None
        _logger.debug(f'action=list-directory, url={url}, ref={branch}')
        return self._json(self._get(url, params=params))

    @staticmethod
    def _content(item, path: str) -> GithubContentModel:
        """Return a validated contents entry."""
        try:
            return GithubContentModel.model_validate(item)
        except ValidationError as ex:
            raise MalformedResponseError(
                f'action=list-directory, path={path}, invalid content entry: {ex}'
            ) from ex

    def _single_file_template(self, payload: dict, path: str) -> TemplateMetadataModel:
        """Return the template for a root path that points at a single file."""
        entry = self._content(payload, path)
        if not entry.is_file:
            raise MalformedResponseError(
                f'action=fetch-templates, path={path}, unexpected entry type={entry.type}'
            )
        if not entry.name.endswith(TEMPLATE_EXTENSION):
            raise ConfigurationError(
                f'action=fetch-templates, path={path}, non-markdown file={entry.name}',
                user_message=(
                    f'The configured path "{path}" points to a file "{entry.name}" that is not '
                    'a markdown file. Please configure a directory path containing markdown '
                    'files.'
                ),
                details={'path': path, 'file_name': entry.name},
            )
        return self._to_template(entry, path)

    @staticmethod
    def _to_template(entry: GithubContentModel, root: str) -> TemplateMetadataModel:
        """Return template metadata with the path relative to the configured root."""
        path = entry.path
        if root and path.startswith(f'{root}/'):
            path = path[len(root) + 1 :]
        elif root and path == root:
            # a single file root keeps its file name
            path = entry.name
        return TemplateMetadataModel.from_path(
            path,
            entry.download_url or '',
            size_bytes=entry.size,
            sha=entry.sha,
        )

    # ==================================================================
    # Other Endpoints
    # ==================================================================

    def fetch_file_content(self, download_url: str) -> str:
        """Return the raw text of a file."""
        return self._get(download_url).text

    def validate_repository(self, owner: str, repo: str) -> ValidationResultModel:
        """Return whether the repository is reachable with the current credentials."""
        try:
            self._get(f'{self.api_url}/repos/{owner}/{repo}')
        except CatalogueError as ex:
            return ValidationResultModel(
                valid=False,
                error=ex.user_message,
                status_code=ex.details.get('status_code'),
            )
        return ValidationResultModel(valid=True)

    def rate_limit_status(self) -> RateLimitInfoModel:
        """Return the current rate limit status.

        Falls back to the documented default limits when the endpoint can not
        be read.
        """
        try:
            data = self._json(self._get(f'{self.api_url}/rate_limit'))
            core = data['resources']['core']
            return RateLimitInfoModel(
                limit=core['limit'],
                remaining=core['remaining'],
                reset=datetime.fromtimestamp(int(core['reset']), tz=UTC),
                authenticated=self.authenticated,
            )
        except (CatalogueError, KeyError, TypeError, ValueError):
            _logger.exception('action=rate-limit-status, failed to read rate limit')
            return RateLimitInfoModel(
                limit=5000 if self.authenticated else 60,
                remaining=0,
                reset=datetime.now(tz=UTC),
                authenticated=self.authenticated,
            )

    # ==================================================================
    # Request Handling
    # ==================================================================

    def _headers(self) -> dict[str, str]:
        """Return per-request headers."""
        if self._token:
            return {'Authorization': f'Bearer {self._token}'}
        return {}

    def _get(self, url: str, params: dict | None = None) -> Response:
        """Issue a GET request and classify any failure."""
        try:
            r = self.session.get(url, headers=self._headers(), params=params, timeout=self.timeout)
        except requests.Timeout as ex:
            raise NetworkError(
                f'action=github-get, url={url}, request timed out: {ex}',
                user_message='Request to GitHub timed out. Please try again.',
            ) from ex
        except requests.RequestException as ex:
            raise NetworkError(f'action=github-get, url={url}, transport error: {ex}') from ex

        self._raise_for_status(r, url)
        return r

    @staticmethod
    def _reset_at(value: str | None) -> datetime | None:
        """Return the rate limit reset time from the X-RateLimit-Reset header."""
        if not value:
            return None
        try:
            return datetime.fromtimestamp(int(value), tz=UTC)
        except (OverflowError, ValueError):
            return None

    def _raise_for_status(self, r: Response, url: str):
        """Raise a classified error for a non-success response."""
        if r.ok:
            return

        status = r.status_code
        details = {'status_code': status, 'url': url}
        message = (
            f'action=github-get, url={url}, status_code={status}, response={r.text or r.reason}'
        )

        if status == 429 or (status == 403 and r.headers.get('X-RateLimit-Remaining') == '0'):
            raise RateLimitError(
                message,
                details=details,
                reset_at=self._reset_at(r.headers.get('X-RateLimit-Reset')),
            )

        if status == 401:
            raise AuthError(
                message,
                user_message='Invalid GitHub token. Please update your authentication token.',
                details=details,
            )

        if status == 403:
            raise AuthError(
                message,
                user_message=(
                    'Access forbidden. Your GitHub token is missing or lacks the scope '
                    'required to read this repository.'
                ),
                details=details,
            )

        if status == 404:
            raise NotFoundError(message, details=details)

        raise NetworkError(
            message,
            user_message=f'GitHub API request failed with status {status}.',
            details=details,
        )

    @staticmethod
    def _json(r: Response):
        """Return the decoded JSON body."""
        try:
            return r.json()
        except ValueError as ex:
            raise MalformedResponseError(
                f'action=decode-json, url={r.url}, invalid JSON body: {ex}'
            ) from ex
