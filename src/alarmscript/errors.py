"""Exceptions for alarmscript: malformed address entries and clipboard failures."""


class AlarmScriptError(Exception):
    """Base exception for alarmscript."""

    pass


class InvalidAddressError(AlarmScriptError):
    """Raised when an address entry does not match the address grammar."""

    def __init__(self, entry: str, message: str | None = None) -> None:
        self.entry = entry
        self._msg = message or f"Invalid address entry: {entry!r}"
        super().__init__(self._msg)


class ClipboardError(AlarmScriptError):
    """Raised when no clipboard tool could take the text."""

    def __init__(self, message: str, *, command: str | None = None, cause: BaseException | None = None) -> None:
        self.command = command
        self.cause = cause
        super().__init__(message)
