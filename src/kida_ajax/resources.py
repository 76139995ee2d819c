"""Client resource references and the process-wide resource registry.

A ResourceReference names a script the page needs and the references it
must load after. The registry maps names to references and is built once
from an AjaxConfig:

    jquery
    ├── kida-ajax      # packaged client runtime
    └── handlebars     # templating library

Thread-Safety:
    References are frozen and the registry never changes after it is built,
    so concurrent requests read both without locking. ``configure()`` is
    meant to run once during startup, before requests are served.

"""

from __future__ import annotations

import importlib.resources
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from kida_ajax.config import DEFAULT_CONFIG, AjaxConfig
from kida_ajax.exceptions import ConfigurationError, ResourceNotFoundError

logger = logging.getLogger(__name__)

JQUERY = "jquery"
HANDLEBARS = "handlebars"
RUNTIME = "kida-ajax"


@dataclass(frozen=True, slots=True)
class ResourceReference:
    """A JavaScript resource and the resources that must load before it.

    Attributes:
        name: Registry key, also used to deduplicate header items
        url: Where the browser loads the script from
        dependencies: References rendered ahead of this one
    """

    name: str
    url: str
    dependencies: tuple[ResourceReference, ...] = field(default=())

    def depends_on(self, *references: ResourceReference) -> ResourceReference:
        """Return a copy with additional dependency edges."""
        return replace(self, dependencies=self.dependencies + references)


def jquery_plugin(name: str, url: str, jquery: ResourceReference) -> ResourceReference:
    """Create a reference that always loads after ``jquery``."""
    return ResourceReference(name, url, (jquery,))


class ResourceRegistry:
    """Read-only lookup of resource references by name.

    Example:
            >>> registry = ResourceRegistry.from_config(AjaxConfig())
            >>> registry.get("handlebars").dependencies[0].name
            'jquery'

    """

    __slots__ = ("_references",)

    def __init__(self, references: Mapping[str, ResourceReference]):
        self._references = MappingProxyType(dict(references))

    @classmethod
    def from_config(cls, config: AjaxConfig) -> ResourceRegistry:
        """Build the default references from configured URLs."""
        jquery = ResourceReference(JQUERY, config.jquery_url)
        return cls(
            {
                JQUERY: jquery,
                RUNTIME: jquery_plugin(RUNTIME, config.runtime_url, jquery),
                HANDLEBARS: jquery_plugin(HANDLEBARS, config.handlebars_url, jquery),
            }
        )

    def get(self, name: str) -> ResourceReference:
        """Look up a reference.

        Raises:
            ResourceNotFoundError: If nothing is registered under ``name``
        """
        try:
            return self._references[name]
        except KeyError:
            raise ResourceNotFoundError(name, sorted(self._references)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._references

    def __iter__(self) -> Iterator[str]:
        return iter(self._references)

    def __len__(self) -> int:
        return len(self._references)


class _State:
    """Holder for the process-wide registry and the config it came from."""

    __slots__ = ("config", "registry")

    def __init__(self) -> None:
        self.config: AjaxConfig | None = None
        self.registry: ResourceRegistry | None = None


_state = _State()


def configure(config: AjaxConfig) -> ResourceRegistry:
    """Initialize the process-wide registry from ``config``.

    Raises:
        ConfigurationError: If the registry was already initialized
    """
    if _state.registry is not None:
        raise ConfigurationError(
            "kida-ajax resources are already configured; call configure() once at startup"
        )
    _state.config = config
    _state.registry = ResourceRegistry.from_config(config)
    logger.debug(f"Configured resources: {', '.join(_state.registry)}")
    return _state.registry


def get_config() -> AjaxConfig:
    """Return the configured AjaxConfig, or DEFAULT_CONFIG if none was set."""
    return _state.config or DEFAULT_CONFIG


def get_registry() -> ResourceRegistry:
    """Return the process-wide registry, building the default on first use."""
    if _state.registry is None:
        configure(DEFAULT_CONFIG)
    assert _state.registry is not None
    return _state.registry


def runtime_source() -> str:
    """Text of the packaged client runtime, for hosts serving ``runtime_url``."""
    return importlib.resources.files("kida_ajax").joinpath("static", "kida-ajax.js").read_text(
        "utf-8"
    )


__all__ = [
    "HANDLEBARS",
    "JQUERY",
    "RUNTIME",
    "ResourceReference",
    "ResourceRegistry",
    "configure",
    "get_config",
    "get_registry",
    "jquery_plugin",
    "runtime_source",
]
