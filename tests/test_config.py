"""Tests for configuration loading."""

from pathlib import Path

import pytest

from ajour.config import AJOUR_HOME, JOURNAL_FILE, Config, load_config


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str) -> Path:
        path = tmp_path / "ajour.conf"
        path.write_text(text)
        return path
    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.journal_file == JOURNAL_FILE
        assert config.day_boundary == "utc"
        assert config.lock_timeout == 10.0

    def test_default_journal_lives_in_home(self):
        assert JOURNAL_FILE.parent == AJOUR_HOME

    def test_reads_all_keys(self, write_config, tmp_path):
        path = write_config(
            f"JOURNAL_FILE = {tmp_path}/notes.json\n"
            "DAY_BOUNDARY = local\n"
            "LOCK_TIMEOUT = 2.5\n"
        )
        config = load_config(path)
        assert config.journal_file == tmp_path / "notes.json"
        assert config.day_boundary == "local"
        assert config.lock_timeout == 2.5

    def test_comments_and_quotes(self, write_config):
        path = write_config(
            "# a comment\n"
            "\n"
            'JOURNAL_FILE = "/tmp/with # hash.json"  # trailing\n'
            "DAY_BOUNDARY = LOCAL # loud\n"
            "not a setting\n"
        )
        config = load_config(path)
        assert config.journal_file == Path("/tmp/with # hash.json")
        assert config.day_boundary == "local"

    def test_expands_user_in_journal_file(self, write_config):
        config = load_config(write_config("JOURNAL_FILE = ~/j.json\n"))
        assert config.journal_file == Path.home() / "j.json"

    def test_empty_journal_file_keeps_default(self, write_config):
        config = load_config(write_config("JOURNAL_FILE =\n"))
        assert config.journal_file == JOURNAL_FILE

    def test_invalid_values_keep_defaults(self, write_config, caplog):
        path = write_config("DAY_BOUNDARY = weekly\nLOCK_TIMEOUT = soon\n")
        config = load_config(path)
        assert config.day_boundary == "utc"
        assert config.lock_timeout == 10.0
        assert "DAY_BOUNDARY" in caplog.text
        assert "LOCK_TIMEOUT" in caplog.text

    def test_unknown_keys_ignored(self, write_config):
        assert load_config(write_config("EXPORT_FORMAT = csv\n")) == Config()
