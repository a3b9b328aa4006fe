"""
Unit tests for wellness_cli.utils module.
"""
import logging

import pytest

from wellness_cli.utils import EchoHandler, edit_file, format_minutes, setup_logging


class TestFormatMinutes:

    def test_zero(self):
        assert format_minutes(0) == "0 minutes"

    def test_negative_is_left_alone(self):
        assert format_minutes(-5) == "-5 minutes"

    def test_hours_and_minutes(self):
        text = format_minutes(105)
        assert "hour" in text
        assert "45 minutes" in text


class TestEditFile:
    """Test the edit_file function."""

    def test_edit_file_exists(self, tmp_path, monkeypatch):
        """Should report a change when the editor modifies the file."""
        test_file = tmp_path / "wellness.toml"
        test_file.write_text('exercise_type = "Exercise"\n')

        def mock_run(*args, **kwargs):
            test_file.write_text('exercise_type = "Sport"\n')
            return type('obj', (object,), {'returncode': 0})

        monkeypatch.setattr("subprocess.run", mock_run)

        assert edit_file(test_file) is True

    def test_edit_file_trailing_newline_is_not_a_change(self, tmp_path, monkeypatch):
        """Should ignore the newline editors append on save."""
        test_file = tmp_path / "wellness.toml"
        test_file.write_text('exercise_type = "Exercise"')

        def mock_run(*args, **kwargs):
            test_file.write_text('exercise_type = "Exercise"\n')
            return type('obj', (object,), {'returncode': 0})

        monkeypatch.setattr("subprocess.run", mock_run)

        assert edit_file(test_file) is False

    def test_edit_file_not_exists(self, tmp_path):
        """Should raise error when file doesn't exist."""
        with pytest.raises(FileNotFoundError):
            edit_file(tmp_path / "nonexistent.toml")


class TestSetupLogging:

    def test_handler_added_once(self):
        setup_logging()
        setup_logging(verbose=True)

        logger = logging.getLogger("wellness")
        assert sum(isinstance(h, EchoHandler) for h in logger.handlers) == 1
        assert logger.level == logging.DEBUG

        setup_logging()
        assert logger.level == logging.WARNING
