"""AJAX call attributes and lifecycle listeners.

AjaxRequestAttributes describes one AJAX call the client runtime wires to
a component: where it goes, how the response is treated, and which
listeners run around it. Components adjust the defaults in their
``update_ajax_attributes()`` before the call is rendered.

Wire contract (``to_dict()``):
    url, method, component, event, preventDefault, dataType,
    wicketAjaxResponse, extraParameters, and one array of functions per
    lifecycle hook that has handlers (precondition, before, beforeSend,
    after, success, failure, complete).

``wicketAjaxResponse`` keeps the client runtime's historical flag name:
when true the runtime applies the response as a component envelope
(``{"components": {id: markup}}``), when false it only hands the parsed
data to the success hooks.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from kida_ajax.functions import HOOK_PARAMETERS, JsonFunction, render_js, wrap_handler

Method = Literal["GET", "POST"]

# Order in which hooks appear in the rendered attributes
HOOKS: tuple[str, ...] = tuple(HOOK_PARAMETERS)


class AjaxCallListener:
    """Collects handler code for the lifecycle hooks of an AJAX call.

    Handlers given as plain strings are function bodies; the hook's
    parameters are available inside them. JsonFunction handlers are
    complete functions and are rendered verbatim.

    Subclasses can override ``get_handler()`` to compute a handler per
    component instead of storing one.

    Example:
            >>> listener = AjaxCallListener().on_precondition("return true;")
            >>> listener.get_handler("precondition", "save")
            'return true;'

    """

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[str, str] = {}

    def _on(self, hook: str, handler: str) -> AjaxCallListener:
        self._handlers[hook] = handler
        return self

    def on_precondition(self, handler: str) -> AjaxCallListener:
        """Handler returning false skips the call entirely."""
        return self._on("precondition", handler)

    def on_before(self, handler: str) -> AjaxCallListener:
        return self._on("before", handler)

    def on_before_send(self, handler: str) -> AjaxCallListener:
        return self._on("beforeSend", handler)

    def on_after(self, handler: str) -> AjaxCallListener:
        return self._on("after", handler)

    def on_success(self, handler: str) -> AjaxCallListener:
        return self._on("success", handler)

    def on_failure(self, handler: str) -> AjaxCallListener:
        return self._on("failure", handler)

    def on_complete(self, handler: str) -> AjaxCallListener:
        return self._on("complete", handler)

    def get_handler(self, hook: str, component: str) -> str | None:
        """Handler code for ``hook`` on ``component``, or None."""
        return self._handlers.get(hook)


@dataclass(slots=True)
class AjaxRequestAttributes:
    """Settings of one AJAX call.

    Attributes:
        url: Callback URL the call is sent to
        method: HTTP method
        event_names: DOM events on the component that trigger the call
        prevent_default: Whether the runtime cancels the DOM event
        data_type: Expected response type, passed to jQuery.ajax
        wicket_ajax_response: Whether the runtime processes the response
            as a component envelope
        extra_parameters: Additional request parameters
        ajax_call_listeners: Listeners contributing lifecycle handlers
    """

    url: str | None = None
    method: Method = "POST"
    event_names: list[str] = field(default_factory=lambda: ["click"])
    prevent_default: bool = True
    data_type: str = "json"
    wicket_ajax_response: bool = True
    extra_parameters: dict[str, str] = field(default_factory=dict)
    ajax_call_listeners: list[AjaxCallListener] = field(default_factory=list)

    def handlers(self, hook: str, component: str) -> list[JsonFunction]:
        """Wrapped handlers every listener contributes to ``hook``."""
        collected: list[JsonFunction] = []
        for listener in self.ajax_call_listeners:
            handler = listener.get_handler(hook, component)
            if handler:
                collected.append(wrap_handler(hook, handler))
        return collected

    def to_dict(self, component: str) -> dict[str, Any]:
        """The attributes as the client runtime consumes them."""
        attrs: dict[str, Any] = {
            "url": self.url,
            "method": self.method,
            "component": component,
            "event": " ".join(self.event_names),
            "preventDefault": self.prevent_default,
            "dataType": self.data_type,
            "wicketAjaxResponse": self.wicket_ajax_response,
        }
        if self.extra_parameters:
            attrs["extraParameters"] = dict(self.extra_parameters)
        for hook in HOOKS:
            handlers = self.handlers(hook, component)
            if handlers:
                attrs[hook] = handlers
        return attrs

    def to_js(self, component: str) -> str:
        """Render ``to_dict()`` as a JavaScript object literal."""
        return render_js(self.to_dict(component))


__all__ = ["HOOKS", "AjaxCallListener", "AjaxRequestAttributes", "Method"]
