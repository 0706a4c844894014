#!/usr/bin/env python3
"""Example: generate an alarm script for one machine and save it next to this file."""

import sys
from pathlib import Path

from alarmscript import AddressType, default_filename, expand, generate


def main() -> None:
    machine = "AS33PerfTest"  # change to your machine name
    ops = """
Op115: CIO4012-4019, W4021, D4031-4034
Op120: H6000-6005, 6010
"""

    # Check one address list on its own
    tokens, invalid = expand("CIO4012-4014, 40a2", AddressType.CIO)
    print(f"expand: {[t.tag for t in tokens]} (invalid: {list(invalid)})")

    result = generate(machine, ops, default_type=AddressType.W)
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    target = Path(__file__).with_name(default_filename(machine))
    target.write_text(result.text, encoding="utf-8")
    print(f"Wrote {len(result.operations)} operations to {target}")


if __name__ == "__main__":
    main()
