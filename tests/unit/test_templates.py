"""Tests for the template catalog and context rendering."""

import pytest
from betterprompts.core.types import ContextFlags, Intent, PromptContext
from betterprompts.templates import (
    PROMPT_TEMPLATES,
    INTENT_LABELS,
    ContextRenderer,
    fill_template,
    get_template_by_id,
    get_templates_by_intent,
)


class TestCatalog:
    """Tests for template lookup."""

    def test_sixteen_templates(self):
        """Test the catalog holds two templates per intent."""
        assert len(PROMPT_TEMPLATES) == 16
        for intent in Intent:
            assert len(get_templates_by_intent(intent)) == 2

    def test_ids_unique(self):
        """Test template ids are unique."""
        ids = [t.id for t in PROMPT_TEMPLATES]
        assert len(ids) == len(set(ids))

    def test_every_template_has_context(self):
        """Test every template carries the context placeholder."""
        for template in PROMPT_TEMPLATES:
            assert "{context}" in template.template

    def test_first_template_per_intent(self):
        """Test templates keep declaration order within an intent."""
        assert get_templates_by_intent(Intent.FIX)[0].id == "fix-bug"
        assert get_templates_by_intent(Intent.ADD)[0].id == "add-feature"
        assert get_templates_by_intent(Intent.EXPLAIN)[0].id == "explain-code"
        assert get_templates_by_intent(Intent.DOCUMENT)[0].id == "document-code"

    def test_get_by_id(self):
        """Test looking up a template by id."""
        template = get_template_by_id("review-security")
        assert template is not None
        assert template.intent is Intent.REVIEW

    def test_get_by_id_missing(self):
        """Test unknown ids return None."""
        assert get_template_by_id("does-not-exist") is None

    def test_labels_cover_all_intents(self):
        """Test every intent has a display label."""
        assert set(INTENT_LABELS) == set(Intent)
        assert INTENT_LABELS[Intent.FIX].label == "Fix"


class TestFillTemplate:
    """Tests for placeholder substitution."""

    def test_fills_content_and_context(self):
        """Test the description and context land in their placeholders."""
        template = get_template_by_id("fix-bug")
        result = fill_template(template, "The button is broken.", "**File:** app.py")
        assert result.startswith("Fix the bug in this code. The issue is: The button is broken.")
        assert "**File:** app.py" in result
        assert "{" not in result

    def test_empty_context(self):
        """Test an empty context block leaves no placeholder behind."""
        template = get_template_by_id("add-feature")
        result = fill_template(template, "Dark mode.", "")
        assert "{context}" not in result
        assert "Dark mode." in result

    def test_template_without_content_placeholder(self):
        """Test templates with only a context placeholder drop the description."""
        template = get_template_by_id("explain-code")
        result = fill_template(template, "Walk through the parser.", "CTX")
        assert "Walk through the parser." not in result
        assert "CTX" in result

    def test_braces_in_description_kept_literal(self):
        """Test substituted text is not re-scanned for placeholders."""
        template = get_template_by_id("fix-bug")
        result = fill_template(template, "KeyError on {context}", "CTX")
        assert "KeyError on {context}" in result


class TestContextRenderer:
    """Tests for the Jinja2 context renderer."""

    @pytest.fixture
    def renderer(self):
        """Create a renderer."""
        return ContextRenderer()

    def test_nothing_requested(self, renderer, code_context):
        """Test no flags means an empty block."""
        assert renderer.render(code_context, ContextFlags()) == ""

    def test_file_section(self, renderer):
        """Test the file section with and without a language."""
        with_language = PromptContext(file_name="app.py", language="python")
        assert renderer.render(with_language, ContextFlags(file=True)) == (
            "**File:** app.py\n**Language:** python"
        )
        without_language = PromptContext(file_name="Makefile")
        assert renderer.render(without_language, ContextFlags(file=True)) == "**File:** Makefile"

    def test_file_and_selection(self, renderer):
        """Test the selection is fenced with the language tag."""
        ctx = PromptContext(file_name="app.py", language="python", selected_code="x = 1")
        result = renderer.render(ctx, ContextFlags.quick())
        assert result == "**File:** app.py\n**Language:** python\n\n**Code:**\n```python\nx = 1\n```"

    def test_section_order(self, renderer, code_context, all_flags):
        """Test sections always come out in file, code, project, git, related order."""
        result = renderer.render(code_context, all_flags)
        positions = [
            result.index("**File:**"),
            result.index("**Code:**"),
            result.index("**Project Structure:**"),
            result.index("**Git Status:**"),
            result.index("**Related Files:**"),
        ]
        assert positions == sorted(positions)

    def test_related_files_bulleted(self, renderer):
        """Test related files render as a bullet list."""
        ctx = PromptContext(related_files=["./a", "./b"])
        result = renderer.render(ctx, ContextFlags(related=True))
        assert result == "\n**Related Files:**\n- ./a\n- ./b"

    def test_flag_without_data_skipped(self, renderer):
        """Test a requested section with no data is silently omitted."""
        ctx = PromptContext(git_status="M app.py")
        result = renderer.render(ctx, ContextFlags(file=True, selection=True, git=True))
        assert result == "\n**Git Status:**\nM app.py"

    def test_data_without_flag_skipped(self, renderer, code_context):
        """Test data is not rendered unless its flag is set."""
        result = renderer.render(code_context, ContextFlags(git=True))
        assert "**File:**" not in result
        assert "M src/app.py" in result

    def test_no_html_escaping(self, renderer):
        """Test code with markup characters is kept verbatim."""
        ctx = PromptContext(selected_code="if a < b && c > d: pass")
        result = renderer.render(ctx, ContextFlags(selection=True))
        assert "if a < b && c > d: pass" in result
