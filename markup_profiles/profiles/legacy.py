"""Deprecated profile helpers kept for older callers."""

import logging
from typing import Any

from markup_profiles.profiles.formatting import quote_char, self_closing_token

logger = logging.getLogger(__name__)


def quote(param: Any) -> str:
    """
    Return quote character based on a profile parameter.

    Deprecated: use ``Profile.attribute_quote()``.
    """
    logger.warning("quote() is deprecated, use Profile.attribute_quote()")
    return quote_char(param)


def self_closing(param: Any) -> str:
    """
    Return self-closing tag symbol based on a profile parameter.

    Deprecated: use ``Profile.self_closing()``.
    """
    logger.warning("self_closing() is deprecated, use Profile.self_closing()")
    return self_closing_token(param)
