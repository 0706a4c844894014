"""Copy generated scripts to the system clipboard through the platform's copy tool."""

import logging
import shutil
import subprocess

from .errors import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; the first one on PATH that accepts the text wins
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def available_clipboard_commands() -> list[tuple[str, ...]]:
    """Clipboard commands found on PATH, in preference order."""
    return [cmd for cmd in CLIPBOARD_COMMANDS if shutil.which(cmd[0])]


def find_clipboard_command() -> tuple[str, ...] | None:
    """Return the first clipboard command available on PATH, or None."""
    available = available_clipboard_commands()
    return available[0] if available else None


def copy_to_clipboard(text: str, timeout: float = 5.0) -> str:
    """
    Copy text to the clipboard. Falls back to the next available tool when one fails.

    Returns the name of the tool used. Raises ClipboardError if none worked.
    """
    last_error: BaseException | None = None
    tried: list[str] = []

    for cmd in available_clipboard_commands():
        tried.append(cmd[0])
        try:
            subprocess.run(list(cmd), input=text, text=True, check=True, timeout=timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Clipboard tool %s failed: %s", cmd[0], e)
            last_error = e
            continue
        logger.debug("Copied %d characters with %s", len(text), cmd[0])
        return cmd[0]

    if not tried:
        raise ClipboardError("No clipboard tool found (tried pbcopy, wl-copy, xclip, xsel, clip)")
    raise ClipboardError(
        f"Copy failed with {', '.join(tried)}",
        command=tried[-1],
        cause=last_error,
    )
