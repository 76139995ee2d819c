"""Exceptions for kida-ajax components.

Exception Hierarchy:
AjaxError (base)
├── InvalidArgumentError      # Empty or missing constructor argument
├── ResourceNotFoundError     # Unknown resource name in the registry
├── CircularDependencyError   # Header items depend on each other
└── ConfigurationError        # Process-wide configuration set twice

Serializer failures are not part of this hierarchy. Whatever the
integrator's serializer raises propagates unchanged to the host framework.

Example:
    ```
    InvalidArgumentError: Argument 'templateId' may not be empty. [KA-ARG-001]
    Docs: https://lbliii.github.io/kida/docs/ajax/errors/#ka-arg-001
    ```

"""

from __future__ import annotations

from enum import Enum

_DOCS_BASE = "https://lbliii.github.io/kida/docs/ajax/errors"


class ErrorCode(Enum):
    """Searchable error codes for kida-ajax errors.

    Format: KA-{CATEGORY}-{NUMBER}
    Categories: ARG (arguments), RES (resources), HDR (header assembly),
    CFG (configuration)
    """

    # Argument errors (KA-ARG-xxx)
    EMPTY_ARGUMENT = "KA-ARG-001"
    NULL_ARGUMENT = "KA-ARG-002"

    # Resource errors (KA-RES-xxx)
    RESOURCE_NOT_FOUND = "KA-RES-001"

    # Header errors (KA-HDR-xxx)
    CIRCULAR_DEPENDENCY = "KA-HDR-001"

    # Configuration errors (KA-CFG-xxx)
    ALREADY_CONFIGURED = "KA-CFG-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}/#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'argument', 'resource', 'header')."""
        prefix = self.value.split("-")[1]
        return {
            "ARG": "argument",
            "RES": "resource",
            "HDR": "header",
            "CFG": "configuration",
        }.get(prefix, "unknown")


class AjaxError(Exception):
    """Base exception for kida-ajax errors.

    Attributes:
        message: Human readable description
        code: Optional ErrorCode, appended to the message with its docs URL
    """

    def __init__(self, message: str, *, code: ErrorCode | None = None):
        self.message = message
        self.code = code
        super().__init__(self._format())

    def _format(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} [{self.code.value}]\nDocs: {self.code.docs_url}"


class InvalidArgumentError(AjaxError, ValueError):
    """A required argument was None, empty or blank."""

    def __init__(self, message: str, *, name: str, code: ErrorCode = ErrorCode.EMPTY_ARGUMENT):
        self.name = name
        super().__init__(message, code=code)


class ResourceNotFoundError(AjaxError, LookupError):
    """No resource with the requested name is registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        message = f"Resource '{name}' is not registered"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, code=ErrorCode.RESOURCE_NOT_FOUND)


class CircularDependencyError(AjaxError):
    """Header items form a dependency cycle and cannot be ordered."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(
            f"Circular header dependency: {' -> '.join(cycle)}",
            code=ErrorCode.CIRCULAR_DEPENDENCY,
        )


class ConfigurationError(AjaxError):
    """Process-wide configuration was initialized more than once."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.ALREADY_CONFIGURED)


__all__ = [
    "AjaxError",
    "CircularDependencyError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidArgumentError",
    "ResourceNotFoundError",
]
