"""Expand comma-separated PLC address lists (CIO4012-4019, W4021, 4030) into tokens."""

import logging
import re

from .errors import InvalidAddressError
from .types import AddressToken, AddressType, ExpansionResult

logger = logging.getLogger(__name__)

# Optional area prefix + number + optional "-end" for a range
_ENTRY_PATTERN = re.compile(
    r"^(CIO|W|D|H)?(\d+)(?:-(\d+))?$",
    re.IGNORECASE | re.ASCII,
)


def parse_entry(entry: str, default_type: AddressType | str) -> tuple[AddressToken, ...]:
    """
    Parse one trimmed address entry into tokens.

    - No prefix: the entry uses default_type.
    - "start-end": one token per number from start to end inclusive, ascending.
      When end < start nothing is produced.

    Raises InvalidAddressError for entries that do not match the grammar.
    """
    s = entry.strip()
    if not s:
        raise InvalidAddressError(entry, "Address entry cannot be empty")

    m = _ENTRY_PATTERN.match(s)
    if not m:
        raise InvalidAddressError(entry, f"Malformed address entry: {entry!r}")

    area = AddressType.parse(m.group(1) or default_type)
    try:
        start = int(m.group(2))
        end = int(m.group(3)) if m.group(3) is not None else start
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidAddressError(entry, f"Address number too long: {entry[:20]!r}...") from None

    return tuple(AddressToken(area, number) for number in range(start, end + 1))


def expand(spec: str, default_type: AddressType | str) -> ExpansionResult:
    """
    Expand a comma-separated address list.

    Entries are trimmed and empty ones dropped. Malformed entries do not stop
    the expansion; they are returned in invalid_entries in input order.
    """
    default_type = AddressType.parse(default_type)
    tokens: list[AddressToken] = []
    invalid: list[str] = []

    for item in (part.strip() for part in spec.split(",")):
        if not item:
            continue
        try:
            tokens.extend(parse_entry(item, default_type))
        except InvalidAddressError as e:
            logger.debug("Skipping address entry: %s", e)
            invalid.append(item)

    logger.debug("Expanded %r into %d addresses (%d invalid)", spec, len(tokens), len(invalid))
    return ExpansionResult(tokens=tuple(tokens), invalid_entries=tuple(invalid))


expand_address_list = expand
