"""Tests for cli module."""

import sys
from unittest.mock import Mock, patch
import pytest
from ascii_banner.cli import main, usage, _call_entry, COMMANDS

# --- Fixtures ---


@pytest.fixture
def mock_module_with_main():
    """Create a mock module with a main function."""
    module = Mock()
    module.main = Mock(return_value=0)
    return module


# --- Tests for usage() ---


class TestUsage:
    def test_usage_output(self, capsys):
        usage()
        captured = capsys.readouterr()
        assert "Usage: ascii-banner <command> [args...]" in captured.out
        assert "Commands: fonts, render" in captured.out


# --- Tests for _call_entry() ---


class TestCallEntry:
    def test_call_entry_passes_argv(self):
        mock_entry = Mock(return_value=0)
        result = _call_entry(mock_entry, ["arg1", "arg2"])

        assert result == 0
        mock_entry.assert_called_once_with(["arg1", "arg2"])

    @pytest.mark.parametrize("code,expected", [(5, 5), (None, 0), ("boom", 0)])
    def test_call_entry_with_system_exit(self, code, expected):
        mock_entry = Mock(side_effect=SystemExit(code))
        assert _call_entry(mock_entry, []) == expected

    def test_call_entry_propagates_other_errors(self):
        mock_entry = Mock(side_effect=RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            _call_entry(mock_entry, [])


# --- Tests for main() ---


class TestMain:
    @pytest.mark.parametrize("argv", [[], ["-h"], ["--help"]])
    def test_main_shows_usage(self, capsys, argv):
        result = main(argv)
        assert result == 0
        assert "Usage: ascii-banner" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", ["unknown", ""])
    def test_main_unknown_command(self, capsys, cmd):
        result = main([cmd])
        captured = capsys.readouterr()

        assert result == 2
        assert f"Unknown command: {cmd}" in captured.err
        assert "Usage: ascii-banner" in captured.out

    @pytest.mark.parametrize("cmd", ["render", "fonts"])
    def test_main_dispatches(self, mock_module_with_main, cmd):
        with patch("ascii_banner.cli.importlib.import_module") as mock_import:
            mock_import.return_value = mock_module_with_main
            result = main([cmd, "arg"])

        assert result == 0
        mock_import.assert_called_once_with(COMMANDS[cmd])
        mock_module_with_main.main.assert_called_once_with(["arg"])

    def test_main_no_main_function(self, capsys):
        with patch("ascii_banner.cli.importlib.import_module") as mock_import:
            mock_import.return_value = Mock(spec=[])
            result = main(["render"])

        assert result == 4
        assert "has no callable 'main'" in capsys.readouterr().err

    def test_main_subcommand_returns_error_code(self):
        mock_module = Mock()
        mock_module.main = Mock(return_value=42)

        with patch("ascii_banner.cli.importlib.import_module") as mock_import:
            mock_import.return_value = mock_module
            result = main(("fonts", "--check"))

        assert result == 42

    def test_main_none_argv_uses_sys_argv(self, mock_module_with_main, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["ascii-banner", "render", "Hi"])

        with patch("ascii_banner.cli.importlib.import_module") as mock_import:
            mock_import.return_value = mock_module_with_main
            result = main(None)

        assert result == 0
        mock_module_with_main.main.assert_called_once_with(["Hi"])


# --- Integration-style Tests ---


class TestCommandsIntegration:
    def test_all_commands_are_importable(self):
        import importlib

        for module_path in COMMANDS.values():
            module = importlib.import_module(module_path)
            assert callable(getattr(module, "main", None)), module_path

    def test_render_end_to_end(self, capsys, monkeypatch):
        monkeypatch.delenv("ASCII_BANNER_FONT_DIR", raising=False)
        assert main(["render", "Hi", "-b", "block"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 8

    def test_argparse_error_becomes_exit_code(self, capsys):
        assert main(["render", "--format", "gif", "Hi"]) == 2
        assert "invalid choice" in capsys.readouterr().err
