"""Placeholder substitution for message templates.

Placeholders are plain ``{name}`` substrings.  There is no escaping:
``{{`` has no special meaning and braces that do not match a supplied
parameter are left alone.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

# Only used for introspection; substitution itself matches exact names.
_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def substitute(template: str, params: Mapping[str, object] | None) -> str:
    """Replace every ``{name}`` in *template* with ``str(params[name])``.

    All parameters are replaced in a single left-to-right pass, so a
    substituted value is never scanned again and the result does not
    depend on the iteration order of *params*.  Longer placeholders win
    when two candidates start at the same position.

    Args:
        template: Raw template string.
        params: Placeholder values.  ``None`` or empty returns *template*
            unchanged.

    Returns:
        The rendered string.  Placeholders without a matching parameter
        stay verbatim.
    """
    if not params:
        return template

    values = {f"{{{name}}}": str(value) for name, value in params.items()}
    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(values, key=len, reverse=True))
    )
    return pattern.sub(lambda m: values[m.group(0)], template)


def placeholders(template: str) -> set[str]:
    """Return the names of all ``{word}`` placeholders in *template*."""
    return set(_PLACEHOLDER_RE.findall(template))
