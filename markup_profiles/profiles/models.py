"""Output profile data models."""

from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from markup_profiles.config import get_settings
from markup_profiles.profiles.formatting import (
    quote_char,
    self_closing_token,
    string_case,
)
from markup_profiles.profiles.precedence import DEFAULT_OPTIONS, merge_options

CaretProvider = Callable[[], str]


def default_caret_placeholder() -> str:
    """Return the configured caret placeholder token."""
    return get_settings().caret_placeholder


class Profile(BaseModel):
    """
    Formatting options for generated markup.

    Option values are stored as given: an unrecognized value is never an
    error, the accessors fall back to their default branch instead.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    tag_case: Any = Field(default="lower", description="Tag name case: lower, upper or leave")
    attr_case: Any = Field(default="lower", description="Attribute name case: lower, upper or leave")
    attr_quotes: Any = Field(default="double", description="Attribute quotes: single or double")
    tag_nl: Any = Field(default="decide", description="Each tag on new line: true, false or 'decide'")
    place_cursor: Any = Field(default=True, description="Emit caret placeholders")
    indent: Any = Field(default=True, description="Indent nested tags")
    inline_break: Any = Field(
        default=3,
        description="Inline siblings count that forces a line break (0 disables)",
    )
    self_closing_tag: Any = Field(
        default="xhtml", description="Empty element style: 'xhtml', true or false"
    )
    filters: Any = Field(default="", description="Output filters overriding syntax filters")

    # None means the configured placeholder from settings
    _caret: Optional[CaretProvider] = PrivateAttr(default=None)

    @classmethod
    def from_options(
        cls,
        options: Optional[Mapping[str, Any]] = None,
        caret: Optional[CaretProvider] = None,
    ) -> "Profile":
        """Build a profile from caller options merged over the defaults."""
        profile = cls.model_validate(merge_options(DEFAULT_OPTIONS, options))
        if caret is not None:
            # partial objects are not descriptors, so they are never bound to the model
            profile._caret = partial(caret)
        return profile

    def tag_name(self, name: str) -> str:
        """Transform tag name case depending on current profile settings."""
        return string_case(name, self.tag_case)

    def attribute_name(self, name: str) -> str:
        """Transform attribute name case depending on current profile settings."""
        return string_case(name, self.attr_case)

    def attribute_quote(self) -> str:
        return quote_char(self.attr_quotes)

    def self_closing(self) -> str:
        return self_closing_token(self.self_closing_tag)

    def cursor(self) -> str:
        """Return the caret token, or an empty string when cursors are off."""
        if not self.place_cursor:
            return ""
        provider = self._caret or default_caret_placeholder
        return provider()

    def to_options(self) -> Dict[str, Any]:
        """Return all option values, including extra keys given at creation."""
        return self.model_dump()


class ProfileSummary(BaseModel):
    """Summary information about a registered profile for discovery."""

    name: str
    tag_case: Any
    attr_case: Any
    self_closing_tag: Any
    filters: Any
