"""Profile option defaults and merging logic."""

from typing import Any, Dict, Mapping, Optional

DEFAULT_OPTIONS: Dict[str, Any] = {
    "tag_case": "lower",
    "attr_case": "lower",
    "attr_quotes": "double",
    # each tag on new line
    "tag_nl": "decide",
    "place_cursor": True,
    # indent tags
    "indent": True,
    # how many inline elements force a line break (0 disables)
    "inline_break": 3,
    # empty element style, e.g. <br /> or <br>
    "self_closing_tag": "xhtml",
    # profile-level output filters, override syntax filters
    "filters": "",
}


def merge_options(
    defaults: Mapping[str, Any],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge profile options with precedence.

    Precedence: overrides > defaults

    Args:
        defaults: Base option record
        overrides: Caller options; may be None

    Returns:
        New dict holding every default key plus any override keys;
        override keys that are not strings are dropped
    """
    merged = dict(defaults)
    if overrides:
        merged.update(
            (key, value) for key, value in overrides.items() if isinstance(key, str)
        )
    return merged
