"""Halstead operator/operand tally over a syntax tree."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from ..scanning.syntax import node_text, walk
from .models import HalsteadTally

OPERATOR_NODES = frozenset(
    {
        "binary_expression",
        "unary_expression",
        "assignment_expression",
        "augmented_assignment_expression",
        "update_expression",
    }
)

IDENTIFIER_NODES = frozenset({"identifier", "shorthand_property_identifier", "undefined"})

LITERAL_NODES = frozenset({"number", "string", "true", "false", "null", "regex"})

SIMPLE_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}

LINE_CONTINUATIONS = frozenset({"\n", "\r\n", "\r", "\u2028", "\u2029"})

# \u{...}, \uXXXX, \xXX, legacy octal (at most \377), line continuation, any other char
_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|.)",
    re.DOTALL,
)

LEGACY_OCTAL_RE = re.compile(r"0[0-7]+")


def operator_symbol(node: Any) -> str:
    """Operator of an expression node; plain assignments have no operator field."""
    op = node.child_by_field_name("operator")
    if op is not None:
        return op.type
    return "="


def literal_value(node: Any) -> str:
    """String form of a literal, so equal values collapse to one operand.

    Strings lose their quotes and have their escapes cooked ('\\x41' == 'A');
    numbers are rendered the way JavaScript's String(n) renders them
    ("0x10" -> "16", "010" -> "8", "1.0" -> "1", "10n" -> "10").
    """
    text = node_text(node)
    if node.type == "string":
        return _ESCAPE_RE.sub(_cook_escape, text[1:-1])
    if node.type == "number":
        number = _number_value(text)
        if number is not None:
            return number
    return text


def _cook_escape(match: re.Match) -> str:
    escape = match.group(1)
    head = escape[0]
    try:
        if head == "u":
            digits = escape[2:-1] if escape[1] == "{" else escape[1:]
            return chr(int(digits, 16))
        if head == "x":
            return chr(int(escape[1:], 16))
        if head in "01234567":
            return chr(int(escape, 8))
    except ValueError:
        return match.group(0)
    if escape in LINE_CONTINUATIONS:
        return ""
    return SIMPLE_ESCAPES.get(escape, escape)


def _number_value(text: str) -> Optional[str]:
    raw = text.replace("_", "").lower()
    try:
        if raw.endswith("n"):
            return str(int(raw[:-1], 0))
        if raw.startswith(("0x", "0o", "0b")):
            return str(int(raw, 0))
        if LEGACY_OCTAL_RE.fullmatch(raw):
            return str(int(raw, 8))
        value = float(raw)
    except ValueError:
        return None
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def halstead(tree: Any) -> HalsteadTally:
    """Tally distinct/total operators and operands in one walk."""
    operators: set[str] = set()
    operands: set[str] = set()
    total_operators = 0
    total_operands = 0

    for node in walk(tree.root_node):
        kind = node.type
        if kind in OPERATOR_NODES:
            operators.add(operator_symbol(node))
            total_operators += 1
        elif kind in IDENTIFIER_NODES:
            operands.add(node_text(node))
            total_operands += 1
        elif kind in LITERAL_NODES and node.is_named:
            operands.add(literal_value(node))
            total_operands += 1

    return HalsteadTally(
        n1=len(operators), n2=len(operands), N1=total_operators, N2=total_operands
    )
