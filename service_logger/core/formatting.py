"""Template formatting that renders values like a debugger would."""

from __future__ import annotations

import pprint
import sys
from typing import Any, Sequence

PLACEHOLDER = "{}"


def inspect(value: Any) -> str:
    """Render a value with its full structure on one line (quoted strings, nested containers)."""
    return pprint.pformat(value, width=sys.maxsize, depth=None, sort_dicts=False)


def d(template: Any, *values: Any) -> str:
    """
    Join template parts with the inspected form of each value.

    template may be:
    - a sequence of literal parts, one more than there are values:
        d(["user: ", " (", ")"], user, 3)
    - a string with "{}" placeholders:
        d("user: {} ({})", user, 3)
    - a t-string Template (anything with .strings and .values):
        d(t"user: {user}")

    Raises ValueError when parts and values do not line up.
    """
    parts: Sequence[str]
    if isinstance(template, str):
        parts = template.split(PLACEHOLDER)
    elif hasattr(template, "strings") and hasattr(template, "values"):
        if values:
            raise ValueError("Template objects carry their own values")
        parts, values = template.strings, tuple(template.values)
    else:
        parts = list(template)

    if len(parts) != len(values) + 1:
        raise ValueError(
            f"Template has {len(parts) - 1} placeholder(s) but {len(values)} value(s) were given"
        )

    result = parts[0]
    for value, part in zip(values, parts[1:]):
        result += inspect(value) + part
    return result
