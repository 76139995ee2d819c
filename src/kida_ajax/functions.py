"""Client-executable code values and their JavaScript rendering.

AJAX attributes travel to the browser as a JavaScript object literal, not
as JSON: lifecycle hooks are functions. A JsonFunction marks a string that
is already code and must be written verbatim. Plain strings given as hook
handlers are treated as function bodies and wrapped with the parameter
list of their hook:

    >>> wrap_handler("complete", "console.log(textStatus);")
    'function(attrs, jqXHR, textStatus){console.log(textStatus);}'

"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

# Arguments the client runtime passes to each lifecycle hook
HOOK_PARAMETERS: dict[str, tuple[str, ...]] = {
    "precondition": ("attrs",),
    "before": ("attrs",),
    "beforeSend": ("attrs", "jqXHR", "settings"),
    "after": ("attrs",),
    "success": ("attrs", "jqXHR", "data", "textStatus"),
    "failure": ("attrs", "jqXHR", "errorMessage", "textStatus"),
    "complete": ("attrs", "jqXHR", "textStatus"),
}


class JsonFunction(str):
    """A string of JavaScript code rendered as-is inside an object literal."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JsonFunction({str.__repr__(self)})"


def wrap_handler(hook: str, body: str) -> JsonFunction:
    """Turn a handler body into a function taking the hook's arguments.

    JsonFunction bodies are returned unchanged.

    Raises:
        KeyError: If ``hook`` is not a known lifecycle hook
    """
    if isinstance(body, JsonFunction):
        return body
    params = ", ".join(HOOK_PARAMETERS[hook])
    return JsonFunction(f"function({params}){{{body}}}")


def _string(value: str) -> str:
    # "</" would close an inline <script> element early
    return (
        json.dumps(value, ensure_ascii=False)
        .replace("</", "<\\/")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def render_js(value: Any) -> str:
    """Render ``value`` as a JavaScript literal.

    Mappings become object literals, sequences become arrays, JsonFunction
    values are emitted raw and everything else is JSON encoded.
    """
    if isinstance(value, JsonFunction):
        return str(value)
    if isinstance(value, str):
        return _string(value)
    if isinstance(value, Mapping):
        members = ",".join(f"{_string(str(k))}:{render_js(v)}" for k, v in value.items())
        return "{" + members + "}"
    if isinstance(value, Sequence):
        return "[" + ",".join(render_js(v) for v in value) + "]"
    return json.dumps(value)


def js_string(value: object) -> str:
    """Kida filter: quote ``value`` as a JavaScript string literal."""
    return _string(str(value))


__all__ = ["HOOK_PARAMETERS", "JsonFunction", "js_string", "render_js", "wrap_handler"]
