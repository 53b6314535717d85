"""Unit tests for the Jinja2 template engine wrapper."""

import pytest

from oas_codegen.codegen.core.templates import (
    RenderError,
    TemplateError,
    create_template_engine,
)


class TestTemplateEngine:
    """Test TemplateEngine rendering and filters."""

    @pytest.fixture
    def engine(self):
        return create_template_engine()

    def test_in_memory_template(self, engine):
        engine.add_template("greeting.j2", "Hello {{ name }}")
        assert engine.template_exists("greeting.j2")
        assert engine.render_template("greeting.j2", {"name": "Pet"}) == "Hello Pet"

    def test_missing_template(self, engine):
        assert not engine.template_exists("missing.j2")
        with pytest.raises(TemplateError, match="Template not found"):
            engine.render_template("missing.j2", {})

    def test_undefined_variable_is_a_render_error(self, engine):
        """Test that templates cannot rely on variables outside the context."""
        engine.add_template("strict.j2", "{{ hidden }}")
        with pytest.raises(RenderError):
            engine.render_template("strict.j2", {})

    def test_comment_filter(self, engine):
        result = engine.render_string('{{ text | comment("///") }}', {"text": "one\n\ntwo\n"})
        assert result == "/// one\n///\n/// two"

    def test_indent_filter(self, engine):
        result = engine.render_string("{{ text | indent_lines(2) }}", {"text": "a\n\nb"})
        assert result == "  a\n\n  b"

    def test_doc_comment_filter(self, engine):
        result = engine.render_string("{{ text | doc_comment }}", {"text": "a */ b\nc"})
        assert result == " * a *\\/ b\n * c"

    def test_add_filter_replaces_builtin(self, engine):
        engine.add_filter("quote", lambda value: f"'{value}'")
        engine.add_template("quote.j2", "{{ value | quote }}")
        assert engine.render_template("quote.j2", {"value": "x"}) == "'x'"

    def test_quote_filter(self, engine):
        engine.add_template("quote.j2", "{{ value | quote }}")
        assert engine.render_template("quote.j2", {"value": 'say "hi"'}) == '"say \\"hi\\""'
