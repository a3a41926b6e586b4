"""Unit tests for environment-driven configuration."""

import pytest

from kioku import config
from kioku.core.revision import GitRevisionResolver

pytestmark = pytest.mark.usefixtures("clean_env")


class TestDefaultLength:
    def test_unset(self):
        assert config.default_length() == config.DEFAULT_LENGTH == 3

    def test_set(self, monkeypatch):
        monkeypatch.setenv("KIOKU_DEFAULT_LENGTH", " 4 ")
        assert config.default_length() == 4

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("KIOKU_DEFAULT_LENGTH", "four")
        with pytest.raises(ValueError, match="must be an integer"):
            config.default_length()

    def test_non_positive_passes_through(self, monkeypatch):
        # The generator, not the config layer, rejects non-positive counts
        monkeypatch.setenv("KIOKU_DEFAULT_LENGTH", "0")
        assert config.default_length() == 0


class TestOtherSettings:
    def test_wordlist_unset(self):
        assert config.default_wordlist() is None

    def test_wordlist_blank(self, monkeypatch):
        monkeypatch.setenv("KIOKU_WORDLIST", "   ")
        assert config.default_wordlist() is None

    def test_wordlist_set(self, monkeypatch):
        monkeypatch.setenv("KIOKU_WORDLIST", "/tmp/words.txt")
        assert config.default_wordlist() == "/tmp/words.txt"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_require_revision_true(self, monkeypatch, value):
        monkeypatch.setenv("KIOKU_REQUIRE_REVISION", value)
        assert config.require_revision() is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no"])
    def test_require_revision_false(self, monkeypatch, value):
        monkeypatch.setenv("KIOKU_REQUIRE_REVISION", value)
        assert config.require_revision() is False

    def test_revision_override(self, monkeypatch):
        assert config.revision_override() is None
        monkeypatch.setenv("KIOKU_REVISION", "abc123")
        assert config.revision_override() == "abc123"

    def test_log_level(self, monkeypatch):
        assert config.log_level() == "WARNING"
        monkeypatch.setenv("KIOKU_LOG_LEVEL", "debug")
        assert config.log_level() == "DEBUG"

    def test_git_executable(self, monkeypatch):
        assert config.git_executable() == "git"
        monkeypatch.setenv("KIOKU_GIT", "/opt/git/bin/git")
        assert config.git_executable() == "/opt/git/bin/git"

    def test_git_executable_read_at_call_time(self, monkeypatch):
        monkeypatch.setenv("KIOKU_GIT", "git-custom")
        assert GitRevisionResolver().git == "git-custom"

    def test_wordlist_asset_exists(self):
        assert config.DEFAULT_WORDLIST_PATH.is_file()
