# otui_preview/otui_parser.py
import json
import logging
import math
import re
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

Value = Union[float, str, list]

# Plain decimal or scientific notation; no underscores, hex or named constants
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class DeclarationList(list):
    """Attribute maps of a declaration repeated under the same parent, in source order."""


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid in an array literal")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"{text} is out of range")
    return number


def coerce_value(raw_value: str) -> Value:
    """Turns a raw property value into an array, a string or a number."""
    if raw_value.startswith("["):
        try:
            return json.loads(
                raw_value.replace("'", '"'),
                parse_constant=_reject_constant,
                parse_float=_finite_float,
            )
        except (ValueError, RecursionError):
            return []
    if raw_value.startswith('"'):
        # No check for the closing quote: an unterminated value loses its last character
        return raw_value[1:-1]
    if not NUMBER_PATTERN.fullmatch(raw_value):
        return raw_value
    number = float(raw_value)
    if not math.isfinite(number):
        return raw_value
    return number


def _add_declaration(parent: Dict[str, Any], name: str, block: Dict[str, Any]) -> None:
    existing = parent.get(name)
    # Empty maps and lists still count as an earlier occurrence; blank scalars do not
    if existing is None or existing == "" or existing == 0:
        parent[name] = block
    elif isinstance(existing, list):
        existing.append(block)
    else:
        parent[name] = DeclarationList([existing, block])


def parse_otui(otui_text: str) -> dict:
    """Parses OTUI-formatted text into a nested dictionary."""
    root: Dict[str, Any] = {}
    # Each frame is (indent, dict collecting attributes at that level)
    stack: List[tuple] = [(-1, root)]

    for line in otui_text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue

        indent = len(line) - len(line.lstrip())

        if ":" not in trimmed:  # Widget declaration
            while indent <= stack[-1][0]:
                stack.pop()
            block: Dict[str, Any] = {}
            _add_declaration(stack[-1][1], trimmed, block)
            stack.append((indent, block))
            continue

        parts = trimmed.split(":", 1)
        if len(parts) < 2:
            continue

        key = parts[0].strip()
        stack[-1][1][key] = coerce_value(parts[1].strip())

    logger.debug("[PARSE] %d top-level declaration(s): %s", len(root), list(root.keys()))
    return root


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        return json.dumps(value)
    return f'"{value}"'


def _is_declaration_run(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(item, dict) for item in value)


def to_otui(tree: dict, current_indent_level: int = 0) -> str:
    """Converts a nested dictionary back to OTUI-formatted text."""
    lines = []
    line_prefix = " " * current_indent_level
    for key, value in tree.items():
        if isinstance(value, dict):
            lines.append(line_prefix + key)
            if value:
                lines.append(to_otui(value, current_indent_level + 2))
        elif isinstance(value, DeclarationList) or _is_declaration_run(value):
            for block in value:
                # A property value promoted together with later declarations of the same name
                if not isinstance(block, dict):
                    lines.append(line_prefix + f"{key}: {_format_scalar(block)}")
                    continue
                lines.append(line_prefix + key)
                if block:
                    lines.append(to_otui(block, current_indent_level + 2))
        else:
            lines.append(line_prefix + f"{key}: {_format_scalar(value)}")
    return "\n".join(lines)


def validate_otui(otui_text: str) -> bool:
    """Checks if the text parses into something the preview can render."""
    parsed = parse_otui(otui_text)
    if not parsed:
        return False
    return isinstance(next(iter(parsed.values())), dict)


def prettify_otui(otui_text: str) -> str:
    """Re-indents and formats OTUI text cleanly by parsing and re-serializing."""
    if not validate_otui(otui_text):
        return otui_text
    return to_otui(parse_otui(otui_text))
