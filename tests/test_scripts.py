"""Tests for packaged script templates."""

import pytest

from kida import TemplateNotFoundError, UndefinedError

from kida_ajax import ScriptTemplate
from kida_ajax.scripts import script_environment


class TestScriptTemplate:
    """Rendering packaged templates."""

    def test_templated_button(self):
        script = ScriptTemplate("templated_button.js").render(
            {"template_id": "person-template", "target_selector": "#person"}
        )
        assert 'document.getElementById("person-template")' in script
        assert 'jQuery("#person").html(template(data))' in script

    def test_comment_not_rendered(self):
        script = ScriptTemplate("templated_button.js").render(
            {"template_id": "t", "target_selector": "#s"}
        )
        assert "{#" not in script

    def test_js_is_not_html_escaped(self):
        script = ScriptTemplate("ajax_call.js").render({"attributes": '{"a":"<b>&"}'})
        assert 'KidaAjax.ajax({"a":"<b>&"});' in script

    def test_missing_variable_is_strict(self):
        with pytest.raises(UndefinedError):
            ScriptTemplate("templated_button.js").render({"template_id": "t"})

    def test_unknown_template(self):
        with pytest.raises(TemplateNotFoundError):
            ScriptTemplate("missing.js").render({})

    def test_name(self):
        assert ScriptTemplate("ajax_call.js").name == "ajax_call.js"


class TestScriptEnvironment:
    """The shared environment."""

    def test_shared(self):
        assert script_environment() is script_environment()

    def test_js_string_filter(self):
        template = script_environment().from_string("{{ value | js_string }}")
        assert template.render(value='a"b') == '"a\\"b"'
