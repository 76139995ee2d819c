"""Pytest configuration and fixtures for kida-ajax tests."""

import pytest

from kida_ajax import AjaxConfig, ResourceRegistry, TemplatedSubmitButton, resources, to_json


@pytest.fixture
def fresh_resources(monkeypatch):
    """An unconfigured process-wide registry, restored after the test."""
    monkeypatch.setattr(resources, "_state", resources._State())


@pytest.fixture
def config():
    return AjaxConfig(
        jquery_url="/static/jquery.js",
        handlebars_url="/static/handlebars.js",
        runtime_url="/static/kida-ajax.js",
        log_prefix="[demo]",
    )


@pytest.fixture
def registry(config):
    return ResourceRegistry.from_config(config)


@pytest.fixture
def button(registry, config):
    """A button for the Person template, independent of global state."""
    return TemplatedSubmitButton(
        "save",
        "person-template",
        "#person",
        to_json,
        callback_url="/person/save",
        registry=registry,
        config=config,
    )
