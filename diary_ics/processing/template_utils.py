"""Placeholder substitution for front-matter templates."""

import json
import re
from datetime import date, datetime
from typing import Any, Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


def has_placeholders(template: str) -> bool:
    """True if the template contains at least one ``{{name}}`` token."""
    return PLACEHOLDER_PATTERN.search(template) is not None


def stringify(value: Any) -> str:
    """String form of a front-matter value as shown in event text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, default=str, separators=(",", ":"))
    return str(value)


def substitute_placeholders(template: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{name}}`` with ``variables[name]`` in one pass.

    Tokens whose name is not in ``variables`` are kept as literal text.
    Substituted values are not scanned again.
    """

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return variables[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)
