"""Placeholder substitution for prompt templates."""

import re
from typing import Any

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def extract_variables(prompt_template: str) -> set[str]:
    """Extract all variable names from a prompt template.

    Args:
        prompt_template: Prompt with {{variable}} placeholders

    Returns:
        Set of variable names found in the template
    """
    return set(_PLACEHOLDER.findall(prompt_template))


def format_prompt(prompt_template: str, variables: dict[str, Any]) -> str:
    """Format a prompt template with variables.

    This function enforces a strict contract:
    - All variables provided must exist in the template
    - All variables in the template must be provided

    Substitution is a single pass, so values that themselves contain
    ``{{...}}`` (user descriptions, background documents) are left untouched.

    Args:
        prompt_template: Prompt with {{variable}} placeholders
        variables: Dictionary of variable values

    Returns:
        Formatted prompt with variables replaced

    Raises:
        ValueError: If provided variables don't exist in the template
        KeyError: If template variables are missing from provided values
    """
    template_variables = extract_variables(prompt_template)
    provided_variables = set(variables.keys())

    # Check for unused provided variables (likely a bug in the template or code)
    unused_variables = provided_variables - template_variables
    if unused_variables:
        raise ValueError(
            f"Variables provided but not in template: {sorted(unused_variables)}. "
            f"Template expects: {sorted(template_variables)}"
        )

    missing_variables = template_variables - provided_variables
    if missing_variables:
        raise KeyError(f"Missing required variables: {sorted(missing_variables)}")

    return _PLACEHOLDER.sub(lambda match: str(variables[match.group(1)]), prompt_template)
