"""String primitives shared by profiles and the legacy helpers."""

from typing import Any, Optional


def string_case(value: str, case_value: Optional[Any]) -> str:
    """
    Convert string case depending on ``case_value``.

    Args:
        value: String to transform
        case_value: Case value: ``lower``, ``upper`` or ``leave``

    Returns:
        Transformed string; unknown case values leave it untouched
    """
    normalized = str(case_value or "").lower()
    if normalized == "lower":
        return value.lower()
    if normalized == "upper":
        return value.upper()
    return value


def quote_char(param: Any) -> str:
    """Return the attribute quote character for a quote parameter."""
    return "'" if param == "single" else '"'


def self_closing_token(param: Any) -> str:
    """Return the empty-element closing symbol for a self-closing parameter."""
    if param == "xhtml":
        return " /"

    # Only the boolean itself counts; 1 or "true" do not
    if param is True:
        return "/"

    return ""
