"""Core data model: address types, tokens, operation blocks and generation results."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class AddressType(str, Enum):
    """PLC memory areas an alarm word can live in."""

    CIO = "CIO"
    W = "W"
    D = "D"
    H = "H"

    @classmethod
    def parse(cls, value: "AddressType | str") -> "AddressType":
        """Accept an AddressType or its name in any case."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown address type {value!r} (expected one of {choices})") from None


@dataclass(frozen=True)
class AddressToken:
    """One PLC word address, e.g. CIO4012."""

    type: AddressType
    number: int

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"number must be >= 0, got {self.number}")

    @property
    def tag(self) -> str:
        return f"{self.type.value}{self.number}"

    def variable(self, machine_name: str) -> str:
        """Script variable holding this word for the given machine."""
        return f"{machine_name}_{self.type.value}_{self.number}"


@dataclass(frozen=True)
class ExpansionResult:
    """Tokens produced from an address list plus the entries that did not parse."""

    tokens: tuple[AddressToken, ...] = ()
    invalid_entries: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[tuple]:
        # Unpacks as (tokens, invalid_entries)
        yield self.tokens
        yield self.invalid_entries

    @property
    def ok(self) -> bool:
        return not self.invalid_entries

    def warning_message(self) -> str | None:
        """Combined message for all invalid entries, or None if there were none."""
        if not self.invalid_entries:
            return None
        return f"Skipped invalid address entries: {', '.join(self.invalid_entries)}"


@dataclass(frozen=True)
class OperationBlock:
    """One 'OpName: AddressSpec' line of the input."""

    name: str
    raw_address_spec: str


@dataclass(frozen=True)
class OperationScript:
    """Wrapped script section generated for one operation block."""

    block: OperationBlock
    expansion: ExpansionResult
    text: str


@dataclass(frozen=True)
class GeneratedScript:
    """Result of a generation call: document text and per-operation diagnostics."""

    text: str
    operations: tuple[OperationScript, ...] = ()

    @property
    def invalid_entries(self) -> tuple[str, ...]:
        return tuple(e for op in self.operations for e in op.expansion.invalid_entries)

    @property
    def warnings(self) -> list[str]:
        """One combined message per operation line that had invalid entries."""
        messages = (op.expansion.warning_message() for op in self.operations)
        return [m for m in messages if m]
