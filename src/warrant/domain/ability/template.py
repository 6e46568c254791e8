"""Condition template rendering.

Stored condition templates are JSON documents whose string leaves may carry
``{{ name }}`` placeholders, e.g. ``{"authorId": "{{id}}"}``. Rendering fills
them from the acting user's attributes. Only allow-listed attribute names
are substituted; anything else renders as an empty string.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

DEFAULT_TEMPLATE_FIELDS = frozenset({"id", "email"})

# {{{ name }}} is the unescaped form; both render the same plain value
_TOKEN = re.compile(r"\{\{\{\s*([^{}\s]*)\s*\}\}\}|\{\{\s*([^{}\s]*)\s*\}\}")
_DIGITS = re.compile(r"[0-9]+")


def render(
    template: Any,
    context: Mapping[str, Any],
    allowed_fields: Iterable[str] = DEFAULT_TEMPLATE_FIELDS,
) -> Any:
    """Resolve placeholders in ``template`` against ``context``.

    Returns None when there is no template (the rule is unconditional). The
    input is never modified; a rendered copy is returned.
    """
    if template is None:
        return None
    allowed = frozenset(allowed_fields)
    return _render_value(template, context, allowed)


def _render_value(value: Any, context: Mapping[str, Any], allowed: frozenset[str]) -> Any:
    if isinstance(value, str):
        return _render_string(value, context, allowed)
    if isinstance(value, Mapping):
        return {key: _render_value(item, context, allowed) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_render_value(item, context, allowed) for item in value]
    return value


def _render_string(value: str, context: Mapping[str, Any], allowed: frozenset[str]) -> Any:
    def substitute(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        if name not in allowed:
            return ""
        return _format(context.get(name))

    rendered = _TOKEN.sub(substitute, value)
    # Templates are stored as text; foreign keys they reference are numeric.
    if _DIGITS.fullmatch(rendered):
        return int(rendered)
    return rendered


def _format(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
