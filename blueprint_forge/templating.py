"""Handlebars rendering shared by the game page and the generator prompt."""

from collections.abc import Callable
from typing import Any

import pybars


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class TemplateError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


# ── Custom Handlebars helpers ────────────────────────────


def _helper_take(this, options, items, count):
    """{{#take array N}}...{{/take}} — iterate over the first N items."""
    result = []
    for item in list(items)[:int(count)]:
        result.extend(options["fn"](item))
    return result


def _helper_join(this, items, separator=", "):
    """{{join array " / "}} — inline list."""
    return separator.join(str(item) for item in items)


_HELPERS: dict[str, Callable] = {
    "take": _helper_take,
    "join": _helper_join,
}


def render(template: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template)
        if compiled is None:
            compiled = _compiler.compile(template)
            _cache[template] = compiled
        return str(compiled(context, helpers=_HELPERS))
    except Exception as e:
        raise TemplateError(f"Template error: {e}") from e
