"""Tests for prompt template substitution."""

import pytest

from n8nforge.planning.prompts.loader import extract_variables, format_prompt


class TestPromptLoader:
    def test_extract_variables(self):
        assert extract_variables("{{a}} and {{b}} and {{a}}") == {"a", "b"}

    def test_format_prompt(self):
        assert format_prompt("Hello {{name}}!", {"name": "n8n"}) == "Hello n8n!"

    def test_unused_variable_raises(self):
        with pytest.raises(ValueError, match="not in template"):
            format_prompt("Hello {{name}}", {"name": "x", "extra": "y"})

    def test_missing_variable_raises(self):
        with pytest.raises(KeyError, match="name"):
            format_prompt("Hello {{name}}", {})

    def test_values_are_not_rescanned(self):
        assert format_prompt("{{a}} {{b}}", {"a": "{{b}}", "b": "x"}) == "{{b}} x"
