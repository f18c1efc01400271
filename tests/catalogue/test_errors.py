"""Tests for the classified error taxonomy."""

# third-party
import pytest

# first-party
from steering_cli.catalogue.errors import (
    AuthError,
    CatalogueError,
    ConfigurationError,
    FetchCancelledError,
    LocalPathError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TooDeepError,
)
from steering_cli.catalogue.model.catalogue_result_model import ClassifiedErrorModel


@pytest.mark.parametrize(
    'error_class,kind,remediation',
    [
        (NotFoundError, 'not_found', 'reconfigure'),
        (AuthError, 'auth', 're-authenticate'),
        (RateLimitError, 'rate_limit', 'wait or configure a token'),
        (NetworkError, 'network', 'retry'),
        (MalformedResponseError, 'malformed_response', 'retry'),
        (ConfigurationError, 'configuration', 'reconfigure'),
        (LocalPathError, 'local_path', 'set a new local path'),
    ],
)
def test_kind_and_remediation(error_class, kind, remediation):
    error = error_class('diagnostic')

    assert isinstance(error, CatalogueError)
    assert error.kind == kind
    assert error.remediation == remediation
    assert str(error) == 'diagnostic'
    assert error.user_message == error_class.default_user_message
    assert error.details == {}


def test_subclasses_keep_parent_remediation():
    assert isinstance(TooDeepError('x'), MalformedResponseError)
    assert TooDeepError('x').remediation == 'retry'
    assert isinstance(FetchCancelledError('x'), NetworkError)
    assert FetchCancelledError('x').remediation == 'retry'


def test_user_message_override():
    error = AuthError('diagnostic', user_message='Token expired.', details={'status_code': 401})

    model = ClassifiedErrorModel.from_error(error)

    assert model.kind == 'auth'
    assert model.message == 'diagnostic'
    assert model.user_message == 'Token expired.'
    assert model.reset_at is None
