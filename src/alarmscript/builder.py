"""Build the alarm-logging control script from 'OpName: AddressSpec' lines."""

import logging
import re

from .addressing import expand
from .types import AddressToken, AddressType, GeneratedScript, OperationBlock, OperationScript

logger = logging.getLogger(__name__)

SEPARATOR = "{" + "-" * 123 + "}"

DEFAULT_FILENAME = "alarm_script.txt"

_HEADER_TEMPLATE = (
    'SQL_VariableOpNumber = "{op_name}";\n'
    "SQL_VariableProduct = {product_var};  {{Product INT from this OP}}\n"
    "SQL_VariableAutoNonAuto = {auto_var};  {{PLC Auto Non/Auto Mode to SQL}}"
)

# The bindlist comment line carries 44 trailing spaces in the deployed scripts
_ALARM_TEMPLATE = "\n".join(
    [
        "IF {variable} <> 0 THEN",
        '  SQL_Variable_AlarmWordNumber = "{tag}";  {{Alarms Word address in PLC}}',
        "  SQL_Variable_AlarmBitsInDecimal = {variable};  {{Gets alarm Value from a PLC Word}}",
        "",
        '   {{Below will Insert all this info to dbo.EPBMachinAlarms Data Table Using Bindlist "EPBMachineAlarmsBindlist"}}'
        + " " * 44,
        '  SQLInsert(SQL_ProductionData_ConnID, "EPBMachineAlarms", "EPBMachineAlarmsBindlist");'
        "  {{Will write to Database only if alarm register not = to zero}}",
        "ENDIF;",
    ]
)

_LINE_SPLIT = re.compile(r"\n+")


def product_variable(machine_name: str, op_name: str) -> str:
    return f"{machine_name}_{op_name}Product"


def auto_variable(machine_name: str, op_name: str) -> str:
    return f"{machine_name}_{op_name}AutoNonAuto"


def parse_operation_line(line: str) -> OperationBlock | None:
    """Split 'OpName: AddressSpec' on the colon; None unless there is exactly one colon."""
    parts = line.split(":")
    if len(parts) != 2:
        return None
    return OperationBlock(name=parts[0].strip(), raw_address_spec=parts[1].strip())


def render_header(machine_name: str, op_name: str) -> str:
    return _HEADER_TEMPLATE.format(
        op_name=op_name,
        product_var=product_variable(machine_name, op_name),
        auto_var=auto_variable(machine_name, op_name),
    )


def render_alarm(machine_name: str, token: AddressToken) -> str:
    """IF block that inserts one alarm word into the alarms table when non-zero."""
    return _ALARM_TEMPLATE.format(variable=token.variable(machine_name), tag=token.tag)


def wrap_section(script: str) -> str:
    return f"{SEPARATOR}\n\n{script}\n\n{SEPARATOR}\n\n"


def generate(
    machine_name: str,
    operation_blocks_text: str,
    default_type: AddressType | str = AddressType.CIO,
) -> GeneratedScript:
    """
    Generate the script document along with per-operation diagnostics.

    Lines are processed in input order. Lines without exactly one colon are
    skipped silently. Invalid address entries are reported per operation in the
    result and never abort generation. Machine and operation names are used
    verbatim in identifiers.
    """
    default_type = AddressType.parse(default_type)
    operations: list[OperationScript] = []

    for line in _LINE_SPLIT.split(operation_blocks_text.strip()):
        block = parse_operation_line(line)
        if block is None:
            if line.strip():
                logger.debug("Skipping line without a single 'OpName: addresses' pair: %r", line)
            continue

        expansion = expand(block.raw_address_spec, default_type)
        script = render_header(machine_name, block.name)
        for token in expansion.tokens:
            script += "\n\n" + render_alarm(machine_name, token)

        operations.append(OperationScript(block=block, expansion=expansion, text=wrap_section(script)))
        logger.debug("Operation %s: %d alarm words", block.name, len(expansion.tokens))

    text = "".join(op.text for op in operations).strip()
    return GeneratedScript(text=text, operations=tuple(operations))


def build(
    machine_name: str,
    operation_blocks_text: str,
    default_type: AddressType | str = AddressType.CIO,
) -> str:
    """Return only the script document text; see generate() for diagnostics."""
    return generate(machine_name, operation_blocks_text, default_type).text


def default_filename(machine_name: str) -> str:
    """File name offered for saving the script: '<machine>.txt' or 'alarm_script.txt'."""
    return f"{machine_name}.txt" if machine_name else DEFAULT_FILENAME
