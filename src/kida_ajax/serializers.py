"""JSON serializers for form model objects.

Submit buttons take any callable ``T -> str``. These helpers cover the
common case of dicts, lists, scalars and dataclasses:

    >>> to_json({"name": "Ada"})
    '{"name":"Ada"}'

Errors from ``json.dumps`` (for example a ``TypeError`` for an object it
cannot encode) propagate to the caller.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from typing import Any

Serializer = Callable[[Any], str]


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def json_serializer(**dumps_kwargs: Any) -> Serializer:
    """Build a serializer around ``json.dumps``.

    Output is compact and keeps non-ASCII characters unless overridden.
    Dataclasses are converted with ``dataclasses.asdict``.
    """
    options: dict[str, Any] = {
        "separators": (",", ":"),
        "ensure_ascii": False,
        "default": _default,
    }
    options.update(dumps_kwargs)

    def serialize(obj: Any) -> str:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            obj = dataclasses.asdict(obj)
        return json.dumps(obj, **options)

    return serialize


to_json: Serializer = json_serializer()


__all__ = ["Serializer", "json_serializer", "to_json"]
