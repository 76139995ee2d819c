"""kida-ajax — AJAX form components for Kida-rendered pages.

Server-side components that answer AJAX submissions with JSON and let a
client-side template update the page.

Quickstart:
    >>> from kida_ajax import Form, HeaderResponse, TemplatedSubmitButton, to_json
    >>> button = TemplatedSubmitButton(
    ...     "save", "person-template", "#person", to_json, callback_url="/save"
    ... )
    >>> head = HeaderResponse()
    >>> button.render_head(head)
    >>> head.to_html()          # jQuery, kida-ajax.js, Handlebars, wiring
    >>> button.on_submit(request, Form("person-form", {"name": "Ada"})).text
    '{"name":"Ada"}'

Architecture:
    TemplatedSubmitButton
    ├── scripts.ScriptTemplate        # Kida templates in kida_ajax/templates
    ├── attributes.AjaxRequestAttributes / AjaxCallListener
    ├── headers.HeaderResponse        # ordered, deduplicated <script> items
    ├── resources.ResourceRegistry    # jquery, kida-ajax, handlebars
    └── responses.TextResponse        # the JSON answer, as a value

Configuration:
    Call ``configure(AjaxConfig(...))`` once at startup to change resource
    URLs, the client log prefix or the response charset. Without it the
    defaults in ``DEFAULT_CONFIG`` apply.

"""

from kida_ajax.args import not_empty, not_none
from kida_ajax.attributes import AjaxCallListener, AjaxRequestAttributes
from kida_ajax.button import TemplatedSubmitButton
from kida_ajax.config import DEFAULT_CONFIG, AjaxConfig
from kida_ajax.exceptions import (
    AjaxError,
    CircularDependencyError,
    ConfigurationError,
    ErrorCode,
    InvalidArgumentError,
    ResourceNotFoundError,
)
from kida_ajax.forms import Form, ModelForm
from kida_ajax.functions import JsonFunction, render_js, wrap_handler
from kida_ajax.headers import (
    HeaderItem,
    HeaderResponse,
    JavaScriptContentHeaderItem,
    JavaScriptReferenceHeaderItem,
)
from kida_ajax.resources import (
    ResourceReference,
    ResourceRegistry,
    configure,
    get_config,
    get_registry,
    runtime_source,
)
from kida_ajax.responses import TextResponse, json_response
from kida_ajax.scripts import ScriptTemplate
from kida_ajax.serializers import json_serializer, to_json

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "AjaxCallListener",
    "AjaxConfig",
    "AjaxError",
    "AjaxRequestAttributes",
    "CircularDependencyError",
    "ConfigurationError",
    "ErrorCode",
    "Form",
    "HeaderItem",
    "HeaderResponse",
    "InvalidArgumentError",
    "JavaScriptContentHeaderItem",
    "JavaScriptReferenceHeaderItem",
    "JsonFunction",
    "ModelForm",
    "ResourceNotFoundError",
    "ResourceReference",
    "ResourceRegistry",
    "ScriptTemplate",
    "TemplatedSubmitButton",
    "TextResponse",
    "__version__",
    "configure",
    "get_config",
    "get_registry",
    "json_response",
    "json_serializer",
    "not_empty",
    "not_none",
    "render_js",
    "runtime_source",
    "to_json",
    "wrap_handler",
]


def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'kida_ajax' has no attribute {name!r}")
