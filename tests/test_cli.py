"""
``user-directory`` command line and log formatters.
"""

import json
import logging
import sys

import pytest
from django.test import override_settings


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the console handler main() installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


# ── cli ───────────────────────────────────────────────────────────────────

class TestListCommand:
    def test_json_is_a_list_of_records(self, capsys):
        from user_directory.cli import main
        assert main(["list"]) == 0
        assert json.loads(capsys.readouterr().out) == [
            {"id": 1, "name": "Alice", "email": "alice@example.com"},
            {"id": 2, "name": "Bob",   "email": "bob@example.com"},
        ]

    def test_table(self, capsys):
        from user_directory.cli import main
        assert main(["list", "--format", "table"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["id", "name", "email"]
        assert lines[2].split() == ["1", "Alice", "alice@example.com"]
        assert lines[3].split() == ["2", "Bob", "bob@example.com"]

    def test_honours_settings(self, capsys):
        from user_directory.cli import main
        with override_settings(USER_DIRECTORY={"USERS": []}):
            main(["list"])
        assert json.loads(capsys.readouterr().out) == []

    def test_verbose_logs_to_stderr(self, capsys):
        from user_directory.cli import main
        main(["-v", "list"])
        assert "get_all returned 2 users" in capsys.readouterr().err

    @pytest.mark.parametrize("cfg", [
        ["USERS"],
        {"USERS": [{"id": 1}]},
        {"REPOSITORY": 42},
    ])
    def test_malformed_settings_are_improperly_configured(self, cfg):
        from django.core.exceptions import ImproperlyConfigured
        from user_directory.cli import main
        with override_settings(USER_DIRECTORY=cfg):
            with pytest.raises(ImproperlyConfigured):
                main(["list"])

    def test_unknown_format_exits(self):
        from user_directory.cli import main
        with pytest.raises(SystemExit):
            main(["list", "--format", "xml"])


class TestConfigCommand:
    def test_prints_settings_block(self, capsys):
        from user_directory.cli import main
        assert main(["config"]) == 0
        out = capsys.readouterr().out
        assert "USER_DIRECTORY = {" in out
        assert "InMemoryUserRepository" in out


# ── logging_structured ────────────────────────────────────────────────────

def _record(msg="store built", exc_info=None, **extra):
    record = logging.LogRecord(
        "user_directory.bootstrap", logging.INFO, __file__, 1, msg, (), exc_info,
    )
    record.__dict__.update(extra)
    return record


class TestStructuredJsonFormatter:
    def test_core_fields(self):
        from user_directory.logging_structured import StructuredJsonFormatter
        doc = json.loads(StructuredJsonFormatter().format(_record()))
        assert doc["level"] == "INFO"
        assert doc["logger"] == "user_directory.bootstrap"
        assert doc["message"] == "store built"
        assert doc["timestamp"].endswith("Z")

    def test_extra_fields_included(self):
        from user_directory.logging_structured import StructuredJsonFormatter
        doc = json.loads(StructuredJsonFormatter().format(_record(records=2)))
        assert doc["records"] == 2
        assert "lineno" not in doc

    def test_exception(self):
        from user_directory.logging_structured import StructuredJsonFormatter
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        doc = json.loads(StructuredJsonFormatter().format(_record(exc_info=exc_info)))
        assert "ValueError: boom" in doc["exception"]


class TestStructuredVerboseFormatter:
    def test_line(self):
        from user_directory.logging_structured import StructuredVerboseFormatter
        line = StructuredVerboseFormatter().format(_record())
        assert line.endswith("INFO    user_directory.bootstrap: store built")
