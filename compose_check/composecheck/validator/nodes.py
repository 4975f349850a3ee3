"""Classification of parsed YAML values.

The parser adapter hands the validator plain Python containers and scalars.
Every rule asks for the kind of a value instead of probing types ad hoc, and
uses the helpers here for the two loose conversions the rules rely on:
truthiness and stringification.
"""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Kind of a value in a parsed document tree."""

    mapping = "mapping"
    sequence = "sequence"
    string = "string"
    number = "number"
    boolean = "boolean"
    null = "null"


def kind_of(value: Any) -> NodeKind:
    """Classify a parsed value.

    bool is checked before number since bool is an int subclass. Anything
    the parser could produce that is not a plain container or scalar
    (timestamps, binary) is treated as a string.
    """
    if value is None:
        return NodeKind.null
    if isinstance(value, bool):
        return NodeKind.boolean
    if isinstance(value, (int, float)):
        return NodeKind.number
    if isinstance(value, str):
        return NodeKind.string
    if isinstance(value, dict):
        return NodeKind.mapping
    if isinstance(value, (list, tuple)):
        return NodeKind.sequence
    return NodeKind.string


def is_truthy(value: Any) -> bool:
    """Truthiness as used by the Compose rules.

    Scalars follow the usual rules (None, False, 0, NaN and "" are falsy)
    but containers are always truthy, so `services: {}` counts as present.
    """
    kind = kind_of(value)
    if kind in (NodeKind.mapping, NodeKind.sequence):
        return True
    if kind == NodeKind.null:
        return False
    if kind == NodeKind.number and isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_text(value: Any) -> str:
    """Stringify a parsed value for messages and pattern checks."""
    kind = kind_of(value)
    if kind == NodeKind.null:
        return "null"
    if kind == NodeKind.boolean:
        return "true" if value else "false"
    if kind == NodeKind.number:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if kind == NodeKind.sequence:
        return ",".join(to_text(item) for item in value)
    if kind == NodeKind.mapping:
        return json.dumps(value, default=str)
    return str(value)
