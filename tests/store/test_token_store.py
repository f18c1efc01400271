"""Tests for the GitHub token stores."""

# standard library
import stat

# first-party
from steering_cli.store.token_store import EnvTokenStore, FileTokenStore


class TestFileTokenStore:
    """Tests for FileTokenStore."""

    def test_round_trip(self, tmp_path):
        store = FileTokenStore(tmp_path / 'token')

        assert store.get_token() is None

        store.set_token(' secret \n')

        assert store.get_token() == 'secret'
        assert stat.S_IMODE((tmp_path / 'token').stat().st_mode) == 0o600

    def test_clear(self, tmp_path):
        store = FileTokenStore(tmp_path / 'token')
        store.set_token('secret')

        store.clear_token()
        store.clear_token()

        assert store.get_token() is None

    def test_empty_file(self, tmp_path):
        (tmp_path / 'token').write_text('  ')

        assert FileTokenStore(tmp_path / 'token').get_token() is None


class TestEnvTokenStore:
    """Tests for EnvTokenStore."""

    def test_env_takes_precedence(self, tmp_path, monkeypatch, clear_token_env_vars):
        fallback = FileTokenStore(tmp_path / 'token')
        fallback.set_token('stored')
        store = EnvTokenStore(fallback)

        assert store.get_token() == 'stored'

        monkeypatch.setenv('GITHUB_PAT', 'pat')
        assert store.get_token() == 'pat'

        monkeypatch.setenv('GITHUB_TOKEN', 'env')
        assert store.get_token() == 'env'

    def test_writes_go_to_fallback(self, tmp_path, clear_token_env_vars):
        fallback = FileTokenStore(tmp_path / 'token')
        store = EnvTokenStore(fallback)

        store.set_token('secret')
        assert fallback.get_token() == 'secret'

        store.clear_token()
        assert fallback.get_token() is None
