"""Tests for TemplatedSubmitButton."""

import json
from dataclasses import dataclass

import pytest
from hypothesis import given

from kida_ajax import (
    AjaxRequestAttributes,
    Form,
    HeaderResponse,
    InvalidArgumentError,
    TemplatedSubmitButton,
    to_json,
)
from kida_ajax.functions import JsonFunction

from .strategies import blank, css_selector, dom_id


@dataclass
class Person:
    name: str


class TestConstruction:
    """Argument validation and the rendered success function."""

    @given(template_id=dom_id, target_selector=css_selector)
    def test_script_contains_parameters(self, template_id, target_selector):
        button = TemplatedSubmitButton("b", template_id, target_selector, to_json)
        assert template_id in button.on_success_function
        assert target_selector in button.on_success_function

    @given(template_id=dom_id, target_selector=css_selector)
    def test_script_is_deterministic(self, template_id, target_selector):
        first = TemplatedSubmitButton("a", template_id, target_selector, to_json)
        second = TemplatedSubmitButton("b", template_id, target_selector, to_json)
        assert first.on_success_function == second.on_success_function

    @given(value=blank)
    def test_blank_template_id_rejected(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TemplatedSubmitButton("b", value, "#target", to_json)
        assert exc_info.value.name == "templateId"

    @given(value=blank)
    def test_blank_target_selector_rejected(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TemplatedSubmitButton("b", "tpl", value, to_json)
        assert exc_info.value.name == "targetSelector"

    def test_both_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            TemplatedSubmitButton("b", "", "", to_json)

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            TemplatedSubmitButton("b", None, "#target", to_json)  # type: ignore[arg-type]

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            TemplatedSubmitButton("b", "tpl", "", to_json)

    def test_empty_id_rejected(self):
        with pytest.raises(InvalidArgumentError):
            TemplatedSubmitButton("", "tpl", "#target", to_json)

    def test_missing_serializer_rejected(self):
        with pytest.raises(InvalidArgumentError):
            TemplatedSubmitButton("b", "tpl", "#target", None)  # type: ignore[arg-type]

    def test_success_function_is_json_function(self, button):
        assert isinstance(button.on_success_function, JsonFunction)
        assert button.on_success_function.startswith("function (attrs, jqXHR, data, textStatus)")
        assert "Handlebars.compile" in button.on_success_function

    def test_default_callback_url(self):
        button = TemplatedSubmitButton("save", "tpl", "#target", to_json)
        assert button.callback_url == "/save"

    def test_quotes_in_selector_are_escaped(self):
        button = TemplatedSubmitButton("b", "tpl", 'a[title="x"]', to_json)
        assert 'jQuery("a[title=\\"x\\"]")' in button.on_success_function


class TestAjaxAttributes:
    """The attribute contract produced by update_ajax_attributes()."""

    @given(template_id=dom_id, target_selector=css_selector)
    def test_json_without_envelope(self, template_id, target_selector):
        button = TemplatedSubmitButton("b", template_id, target_selector, to_json)
        attrs = button.get_ajax_attributes().to_dict("b")
        assert attrs["dataType"] == "json"
        assert attrs["wicketAjaxResponse"] is False

    def test_overrides_existing_values(self, button):
        attributes = AjaxRequestAttributes(data_type="html", wicket_ajax_response=True)
        button.update_ajax_attributes(attributes)
        assert attributes.data_type == "json"
        assert attributes.wicket_ajax_response is False
        assert attributes.url == "/person/save"

    def test_hooks(self, button):
        attrs = button.get_ajax_attributes().to_dict("save")
        assert set(attrs) >= {"before", "complete", "precondition", "success"}
        assert attrs["precondition"] == ["function(attrs){return true;}"]
        assert attrs["success"] == [button.on_success_function]

    def test_diagnostic_hooks_use_log_prefix(self, button):
        attrs = button.get_ajax_attributes().to_dict("save")
        assert "[demo]: executing a before handler" in attrs["before"][0]
        assert "+ textStatus" in attrs["complete"][0]
        assert attrs["complete"][0].startswith("function(attrs, jqXHR, textStatus)")

    def test_success_rendered_verbatim(self, button):
        rendered = button.get_ajax_attributes().to_js("save")
        assert '"success":[' + button.on_success_function + "]" in rendered


class TestSubmit:
    """on_submit() builds the JSON response."""

    def test_response_body_and_type(self, button):
        response = button.on_submit(object(), Form("f", Person(name="Ada")))
        assert response.text == '{"name":"Ada"}'
        assert response.content_type == "application/json"
        assert response.content_type_header == "application/json; charset=UTF-8"

    def test_request_is_ignored(self, button):
        assert button.on_submit(None, Form("f", {"name": "Ada"})).text == '{"name":"Ada"}'

    def test_custom_serializer(self, registry, config):
        button = TemplatedSubmitButton(
            "b",
            "tpl",
            "#t",
            lambda person: json.dumps({"upper": person.name.upper()}),
            registry=registry,
            config=config,
        )
        response = button.on_submit(None, Form("f", Person(name="Ada")))
        assert json.loads(response.text) == {"upper": "ADA"}

    def test_serializer_errors_propagate(self, registry):
        class Boom(Exception):
            pass

        def serializer(obj):
            raise Boom("cannot serialize")

        button = TemplatedSubmitButton("b", "tpl", "#t", serializer, registry=registry)
        with pytest.raises(Boom):
            button.on_submit(None, Form("f", object()))

    def test_unserializable_object_raises_type_error(self, button):
        with pytest.raises(TypeError):
            button.on_submit(None, Form("f", object()))

    def test_non_string_result_rejected(self, registry):
        button = TemplatedSubmitButton("b", "tpl", "#t", lambda obj: obj, registry=registry)
        with pytest.raises(TypeError, match="expected str"):
            button.on_submit(None, Form("f", {"name": "Ada"}))

    def test_subclass_can_override_as_json(self, registry):
        @dataclass
        class Point:
            x: int
            y: int

        class PointButton(TemplatedSubmitButton[Point]):
            def as_json(self, obj: Point) -> str:
                return f"[{obj.x},{obj.y}]"

        button = PointButton("b", "tpl", "#t", to_json, registry=registry)
        assert button.on_submit(None, Form("f", Point(1, 2))).text == "[1,2]"

    def test_charset_from_config(self, registry):
        from kida_ajax import AjaxConfig

        button = TemplatedSubmitButton(
            "b", "tpl", "#t", to_json, registry=registry, config=AjaxConfig(charset="ISO-8859-1")
        )
        response = button.on_submit(None, Form("f", {"name": "Zoë"}))
        assert response.body == '{"name":"Zoë"}'.encode("iso-8859-1")


class TestRenderHead:
    """Head contributions of the button."""

    def test_handlebars_after_jquery(self, button):
        head = HeaderResponse()
        button.render_head(head)
        tokens = [item.token for item in head.items()]
        assert tokens.index("jquery") < tokens.index("handlebars")
        assert tokens.index("kida-ajax") < tokens.index("kida-ajax-save")

    def test_handlebars_once_per_page(self, button, registry, config):
        other = TemplatedSubmitButton(
            "other", "tpl", "#t", to_json, registry=registry, config=config
        )
        head = HeaderResponse()
        button.render_head(head)
        other.render_head(head)
        button.render_head(head)
        html = head.to_html()
        assert html.count('src="/static/handlebars.js"') == 1
        assert html.count('src="/static/jquery.js"') == 1
        assert html.index("/static/jquery.js") < html.index("/static/handlebars.js")

    def test_wiring_script(self, button):
        head = HeaderResponse()
        button.render_head(head)
        html = head.to_html()
        assert '<script id="kida-ajax-save">' in html
        assert "KidaAjax.ajax(" in html
        assert '"component":"save"' in html
        assert '"url":"/person/save"' in html


class TestMarkup:
    """render_markup() output."""

    def test_button_markup(self, button):
        assert button.render_markup("Save") == (
            '<button type="submit" id="save" name="save">Save</button>'
        )

    def test_label_is_escaped(self, button):
        assert "&lt;b&gt;" in button.render_markup("<b>")
