"""Tests for repository reference parsing."""

# third-party
import pytest

# first-party
from steering_cli.catalogue.errors import ConfigurationError
from steering_cli.catalogue.url_parser import is_valid_github_name, parse_repository_url


class TestParseRepositoryUrl:
    """Tests for parse_repository_url()."""

    @pytest.mark.parametrize(
        'url,identity',
        [
            ('owner/repo', 'owner/repo'),
            ('  owner/repo  ', 'owner/repo'),
            ('owner/repo/steering', 'owner/repo/steering'),
            ('owner/repo/a//b/', 'owner/repo/a/b'),
            ('https://github.com/owner/repo', 'owner/repo'),
            ('https://github.com/owner/repo.git', 'owner/repo'),
            ('http://github.com/my-org/my-repo', 'my-org/my-repo'),
        ],
    )
    def test_valid(self, url, identity):
        assert parse_repository_url(url).identity == identity

    def test_branch(self):
        assert parse_repository_url('o/r').branch == 'main'
        assert parse_repository_url('o/r', 'develop').branch == 'develop'

    @pytest.mark.parametrize(
        'url,match',
        [
            ('', 'Empty'),
            ('   ', 'Empty'),
            ('owner', 'Invalid repository URL format'),
            ('-owner/repo', 'Invalid owner'),
            ('owner/re_po', 'Invalid repository name'),
            ('owner/', 'Invalid repository name'),
        ],
    )
    def test_invalid(self, url, match):
        with pytest.raises(ConfigurationError, match=match) as ex:
            parse_repository_url(url)

        assert ex.value.remediation == 'reconfigure'

    @pytest.mark.parametrize(
        'name,valid', [('abc', True), ('a-1', True), ('-a', False), ('a.b', False), ('', False)]
    )
    def test_is_valid_github_name(self, name, valid):
        assert is_valid_github_name(name) is valid
