"""Page head contributions.

Components add header items to a HeaderResponse while a page renders.
The response keeps each item once and orders items so every dependency
comes before the items that need it:

    >>> response = HeaderResponse()
    >>> response.render(JavaScriptReferenceHeaderItem(registry.get("handlebars")))
    >>> [item.token for item in response.items()]
    ['jquery', 'handlebars']

A HeaderResponse belongs to a single page render and is not shared
between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kida import Markup

from kida_ajax.exceptions import CircularDependencyError
from kida_ajax.resources import ResourceReference
from kida_ajax.scripts import script_environment

logger = logging.getLogger(__name__)


class HeaderItem:
    """Base of items rendered into the page head."""

    __slots__ = ()

    @property
    def token(self) -> str:
        """Key used to render the item only once per page."""
        raise NotImplementedError

    @property
    def dependencies(self) -> tuple[HeaderItem, ...]:
        return ()

    @property
    def url(self) -> str | None:
        return None

    @property
    def script(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class JavaScriptReferenceHeaderItem(HeaderItem):
    """``<script src>`` for a resource reference."""

    reference: ResourceReference

    @property
    def token(self) -> str:
        return self.reference.name

    @property
    def dependencies(self) -> tuple[HeaderItem, ...]:
        return tuple(JavaScriptReferenceHeaderItem(dep) for dep in self.reference.dependencies)

    @property
    def url(self) -> str:
        return self.reference.url


@dataclass(frozen=True, slots=True)
class JavaScriptContentHeaderItem(HeaderItem):
    """Inline script, optionally requiring resources to load first."""

    content: str
    id: str
    requires: tuple[ResourceReference, ...] = ()

    @property
    def token(self) -> str:
        return self.id

    @property
    def dependencies(self) -> tuple[HeaderItem, ...]:
        return tuple(JavaScriptReferenceHeaderItem(ref) for ref in self.requires)

    @property
    def script(self) -> str:
        return self.content


class HeaderResponse:
    """Collects head items for one page render."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[str, HeaderItem] = {}

    def render(self, item: HeaderItem) -> None:
        """Add ``item`` unless an item with the same token was rendered."""
        if item.token in self._items:
            return
        self._items[item.token] = item

    def was_rendered(self, token: str) -> bool:
        return token in self._items

    def items(self) -> list[HeaderItem]:
        """Rendered items with dependencies first, otherwise in render order.

        Raises:
            CircularDependencyError: If dependency edges form a cycle
        """
        ordered: dict[str, HeaderItem] = {}
        visiting: list[str] = []

        def visit(item: HeaderItem) -> None:
            if item.token in ordered:
                return
            if item.token in visiting:
                start = visiting.index(item.token)
                raise CircularDependencyError([*visiting[start:], item.token])
            visiting.append(item.token)
            for dependency in item.dependencies:
                # An explicitly rendered item wins over the implied one
                visit(self._items.get(dependency.token, dependency))
            visiting.pop()
            ordered[item.token] = item

        for item in list(self._items.values()):
            visit(item)
        return list(ordered.values())

    def to_html(self) -> Markup:
        """Render the ordered items as ``<script>`` elements."""
        items = self.items()
        logger.debug(f"Rendering {len(items)} head items: {', '.join(i.token for i in items)}")
        html = script_environment().get_template("head.html").render(items=items)
        return Markup(html)


__all__ = [
    "HeaderItem",
    "HeaderResponse",
    "JavaScriptContentHeaderItem",
    "JavaScriptReferenceHeaderItem",
]
