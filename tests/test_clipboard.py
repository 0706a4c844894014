"""Tests for the clipboard adapter (subprocess and PATH lookups mocked)."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from alarmscript.clipboard import available_clipboard_commands, copy_to_clipboard, find_clipboard_command
from alarmscript.errors import ClipboardError


def which_only(*available: str):
    return lambda name: f"/usr/bin/{name}" if name in available else None


@patch("alarmscript.clipboard.subprocess.run")
@patch("alarmscript.clipboard.shutil.which", side_effect=which_only("xclip"))
def test_copy_uses_first_available_tool(mock_which: MagicMock, mock_run: MagicMock) -> None:
    assert copy_to_clipboard("hello") == "xclip"
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args[0] == ["xclip", "-selection", "clipboard"]
    assert kwargs["input"] == "hello"
    assert kwargs["check"] is True


@patch("alarmscript.clipboard.subprocess.run")
@patch("alarmscript.clipboard.shutil.which", side_effect=which_only("wl-copy", "xsel"))
def test_copy_falls_back_on_failure(mock_which: MagicMock, mock_run: MagicMock) -> None:
    mock_run.side_effect = [subprocess.CalledProcessError(1, ["wl-copy"]), MagicMock()]

    assert copy_to_clipboard("hello") == "xsel"
    assert mock_run.call_count == 2


@patch("alarmscript.clipboard.subprocess.run")
@patch("alarmscript.clipboard.shutil.which", side_effect=which_only("pbcopy"))
def test_copy_all_tools_fail(mock_which: MagicMock, mock_run: MagicMock) -> None:
    mock_run.side_effect = OSError("permission denied")

    with pytest.raises(ClipboardError, match="Copy failed with pbcopy") as exc_info:
        copy_to_clipboard("hello")
    assert exc_info.value.command == "pbcopy"
    assert isinstance(exc_info.value.cause, OSError)


@patch("alarmscript.clipboard.shutil.which", return_value=None)
def test_copy_without_any_tool(mock_which: MagicMock) -> None:
    with pytest.raises(ClipboardError, match="No clipboard tool found"):
        copy_to_clipboard("hello")


@patch("alarmscript.clipboard.shutil.which", side_effect=which_only("clip", "xsel"))
def test_find_clipboard_command(mock_which: MagicMock) -> None:
    assert find_clipboard_command() == ("xsel", "--clipboard", "--input")


@patch("alarmscript.clipboard.shutil.which", return_value=None)
def test_find_clipboard_command_none(mock_which: MagicMock) -> None:
    assert find_clipboard_command() is None


@patch("alarmscript.clipboard.shutil.which", side_effect=which_only("wl-copy", "clip"))
def test_available_clipboard_commands_keeps_preference_order(mock_which: MagicMock) -> None:
    assert available_clipboard_commands() == [("wl-copy",), ("clip",)]
