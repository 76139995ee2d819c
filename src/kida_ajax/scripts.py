"""Parametrized text templates shipped with kida-ajax.

Templates live in ``kida_ajax/templates`` and are loaded through Kida's
PackageLoader. Script templates (``*.js``) render without autoescape and
quote substituted values with the ``js_string`` filter; HTML templates
render with autoescape on.

Example:
    >>> ScriptTemplate("templated_button.js").render(
    ...     {"template_id": "person-template", "target_selector": "#person"}
    ... )

Thread-Safety:
    The environment is created once and shared. Kida templates render with
    local state only, so concurrent renders need no locking.

"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from kida import Environment, PackageLoader

from kida_ajax.functions import js_string


def _autoescape(name: str | None) -> bool:
    return name is not None and name.endswith(".html")


@lru_cache(maxsize=1)
def script_environment() -> Environment:
    """The shared Environment for packaged templates."""
    env = Environment(
        loader=PackageLoader("kida_ajax", "templates"),
        autoescape=_autoescape,
    )
    env.add_filter("js_string", js_string)
    return env


class ScriptTemplate:
    """A packaged text template rendered with a mapping of variables."""

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, variables: Mapping[str, object]) -> str:
        """Render the template. Equal variables always give equal text."""
        template = script_environment().get_template(self._name)
        return template.render(**variables)


__all__ = ["ScriptTemplate", "script_environment"]
