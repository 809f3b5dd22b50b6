"""Placeholder substitution for template fragments.

Markers have the form ``{name}``. Substitution is a single left-to-right
pass over the fragment: text inserted for one marker is never scanned
again, so a value such as ``"{title}"`` stays literal in the output.
Markers without an entry in the map are left untouched, and values are
inserted verbatim without any HTML escaping.
"""

from __future__ import annotations

import re
from typing import Mapping


def placeholder(name: str) -> str:
    """Return the marker text for a placeholder name."""
    return "{" + name + "}"


def substitute(template: str, values: Mapping[str, object]) -> str:
    """Replace every ``{name}`` marker in *template* with ``values[name]``.

    Args:
        template: Fragment text containing zero or more markers.
        values: Placeholder name (without braces) to replacement text.
            Non-string values are converted with ``str()``.

    Returns:
        The fragment with all known markers replaced.

    Example:
        >>> substitute("<p>{content}</p>{footer}", {"content": "hi"})
        '<p>hi</p>{footer}'
    """
    if not values or not template:
        return template

    # Longest names first keeps the alternation deterministic.
    names = sorted(values, key=lambda name: (-len(name), name))
    pattern = re.compile(
        "|".join(re.escape(placeholder(name)) for name in names)
    )
    replacements = {placeholder(name): str(values[name]) for name in names}

    return pattern.sub(lambda match: replacements[match.group(0)], template)

