"""Submit button that renders its JSON response with a Handlebars template.

TemplatedSubmitButton handles an AJAX form submission by serializing the
form's model object to JSON and returning it as the whole response. In
the browser, its success hook compiles a Handlebars template found by id
and writes the result into the element matched by a CSS selector.

Flow:
    click ─▶ precondition ─▶ before ─▶ POST callback_url
                                           │
                 on_submit(request, form) ◀┘
                 └─▶ serializer(form.get_model_object())
                 └─▶ TextResponse(application/json)
                                           │
    Handlebars(template_id)(data) ─▶ $(target_selector) ◀─ success

Example:
    >>> button = TemplatedSubmitButton(
    ...     "save", "person-template", "#person", to_json, callback_url="/save"
    ... )
    >>> response = button.on_submit(request, Form("person-form", person))
    >>> response.text
    '{"name":"Ada"}'

Thread-Safety:
    Everything a button holds is assigned in ``__init__`` and never changed,
    so one instance can serve concurrent requests.

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from kida import Markup

from kida_ajax.args import not_empty, not_none
from kida_ajax.attributes import AjaxCallListener, AjaxRequestAttributes
from kida_ajax.config import AjaxConfig
from kida_ajax.forms import ModelForm
from kida_ajax.functions import JsonFunction, js_string
from kida_ajax.headers import (
    HeaderResponse,
    JavaScriptContentHeaderItem,
    JavaScriptReferenceHeaderItem,
)
from kida_ajax.resources import HANDLEBARS, RUNTIME, ResourceRegistry, get_config, get_registry
from kida_ajax.responses import TextResponse, json_response
from kida_ajax.scripts import ScriptTemplate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _SuccessListener(AjaxCallListener):
    """Listener whose success handler is the button's rendered function."""

    __slots__ = ("_function",)

    def __init__(self, function: JsonFunction):
        super().__init__()
        self._function = function

    def get_handler(self, hook: str, component: str) -> str | None:
        if hook == "success":
            # A JsonFunction is rendered as-is
            return self._function
        return super().get_handler(hook, component)


class TemplatedSubmitButton(Generic[T]):
    """AJAX submit button answering with JSON rendered by Handlebars.

    Args:
        id: Component id, used as the button's DOM id and name
        template_id: DOM id of the Handlebars template, e.g. the ``id`` of
            ``<script id="..." type="text/x-handlebars-template">``
        target_selector: CSS selector of the element updated with the
            populated template
        serializer: Converts the form's model object to JSON text
        callback_url: URL the AJAX call posts to (default ``/<id>``)
        registry: Resource registry (default: the process-wide one)
        config: Settings for log prefix and charset (default: the
            process-wide one)

    Raises:
        InvalidArgumentError: If ``id``, ``template_id`` or
            ``target_selector`` is empty, or ``serializer`` is None
    """

    def __init__(
        self,
        id: str,
        template_id: str,
        target_selector: str,
        serializer: Callable[[T], str],
        *,
        callback_url: str | None = None,
        registry: ResourceRegistry | None = None,
        config: AjaxConfig | None = None,
    ):
        self._id = not_empty(id, "id")
        self._template_id = not_empty(template_id, "templateId")
        self._target_selector = not_empty(target_selector, "targetSelector")
        self._serializer = not_none(serializer, "serializer")
        self._callback_url = callback_url or f"/{id}"
        self._registry = registry or get_registry()
        self._config = config or get_config()

        script = ScriptTemplate("templated_button.js").render(
            {"template_id": template_id, "target_selector": target_selector}
        )
        self._on_success_function = JsonFunction(script.strip())
        logger.debug(f"Created templated button {id!r} for template {template_id!r}")

    @property
    def id(self) -> str:
        return self._id

    @property
    def template_id(self) -> str:
        return self._template_id

    @property
    def target_selector(self) -> str:
        return self._target_selector

    @property
    def callback_url(self) -> str:
        return self._callback_url

    @property
    def on_success_function(self) -> JsonFunction:
        """Body of the success hook; receives the parsed response as ``data``."""
        return self._on_success_function

    def update_ajax_attributes(self, attributes: AjaxRequestAttributes) -> None:
        """Switch the call to JSON and register the lifecycle listener."""
        attributes.url = self._callback_url
        attributes.method = "POST"

        # the browser parses the response as JSON before the success hook
        attributes.data_type = "json"

        # the response is plain JSON, not a component envelope
        attributes.wicket_ajax_response = False

        prefix = self._config.log_prefix
        listener = _SuccessListener(self._on_success_function)
        listener.on_before(
            f"KidaAjax.Log.info({js_string(prefix + ': executing a before handler')});"
        )
        listener.on_complete(
            f"KidaAjax.Log.info({js_string(prefix + ': executing a complete handler. Status: ')}"
            " + textStatus);"
        )
        # change to 'return false;' and the call is never sent
        listener.on_precondition("return true;")

        attributes.ajax_call_listeners.append(listener)

    def get_ajax_attributes(self) -> AjaxRequestAttributes:
        """Default attributes adjusted by ``update_ajax_attributes()``."""
        attributes = AjaxRequestAttributes()
        self.update_ajax_attributes(attributes)
        return attributes

    def as_json(self, obj: T) -> str:
        """Serialize ``obj`` with the configured serializer.

        Raises:
            TypeError: If the serializer returns something other than str
        """
        text = self._serializer(obj)
        if not isinstance(text, str):
            raise TypeError(
                f"Serializer for button {self._id!r} returned {type(text).__name__}, expected str"
            )
        return text

    def on_submit(self, request: object, form: ModelForm[T]) -> TextResponse:
        """Serialize the form's model object and return it as the response.

        Args:
            request: The host's request object. Not used; the response is
                built from the form alone.
            form: Form holding the model object

        Returns:
            The only response sent for this request
        """
        text = self.as_json(form.get_model_object())
        logger.debug(f"Button {self._id!r} answering form {form.id!r} with {len(text)} chars")
        return json_response(text, self._config.charset)

    def render_head(self, response: HeaderResponse) -> None:
        """Contribute the client runtime, Handlebars and the call wiring."""
        runtime = self._registry.get(RUNTIME)
        response.render(JavaScriptReferenceHeaderItem(runtime))
        response.render(JavaScriptReferenceHeaderItem(self._registry.get(HANDLEBARS)))
        script = ScriptTemplate("ajax_call.js").render(
            {"attributes": self.get_ajax_attributes().to_js(self._id)}
        )
        response.render(
            JavaScriptContentHeaderItem(script, f"kida-ajax-{self._id}", requires=(runtime,))
        )

    def render_markup(self, label: str = "Submit") -> Markup:
        """``<button>`` element for this component."""
        return Markup('<button type="submit" id="{0}" name="{0}">{1}</button>').format(
            self._id, label
        )


__all__ = ["TemplatedSubmitButton"]
