"""Configuration for kida-ajax components.

Configuration is immutable. Build an AjaxConfig once at startup and hand it
to ``kida_ajax.resources.configure()``; components read it through the
resource registry afterwards.

Example:
    >>> from kida_ajax import AjaxConfig, configure
    >>> configure(AjaxConfig(jquery_url="/static/jquery.min.js"))

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AjaxConfig:
    """Process-wide settings for client resources and responses.

    Attributes:
        jquery_url: URL of the base DOM/query library
        handlebars_url: URL of the Handlebars templating library
        runtime_url: URL where the host serves the packaged ``kida-ajax.js``
        log_prefix: Prefix of the diagnostic messages logged by the
            before/complete hooks in the browser console
        charset: Charset declared on JSON responses
    """

    jquery_url: str = "https://code.jquery.com/jquery-3.7.1.min.js"
    handlebars_url: str = "https://cdn.jsdelivr.net/npm/handlebars@4.7.8/dist/handlebars.min.js"
    runtime_url: str = "/_kida_ajax/kida-ajax.js"
    log_prefix: str = "[kida-ajax]"
    charset: str = "UTF-8"


DEFAULT_CONFIG = AjaxConfig()
