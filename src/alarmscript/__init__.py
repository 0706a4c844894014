"""alarmscript: expand PLC alarm word addresses into SQL alarm-logging control scripts."""

__version__ = "0.1.0"

from .addressing import expand, expand_address_list, parse_entry
from .builder import build, default_filename, generate, parse_operation_line
from .clipboard import copy_to_clipboard
from .errors import AlarmScriptError, ClipboardError, InvalidAddressError
from .types import (
    AddressToken,
    AddressType,
    ExpansionResult,
    GeneratedScript,
    OperationBlock,
    OperationScript,
)

__all__ = [
    "__version__",
    "expand",
    "expand_address_list",
    "parse_entry",
    "build",
    "default_filename",
    "generate",
    "parse_operation_line",
    "copy_to_clipboard",
    "AlarmScriptError",
    "ClipboardError",
    "InvalidAddressError",
    "AddressToken",
    "AddressType",
    "ExpansionResult",
    "GeneratedScript",
    "OperationBlock",
    "OperationScript",
]
