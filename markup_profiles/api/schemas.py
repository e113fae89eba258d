# markup_profiles/api/schemas.py
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ProfileOptionsModel(BaseModel):
    """Options for a new profile; omitted fields keep the defaults."""

    # extra keys are carried into the profile as-is
    model_config = ConfigDict(extra="allow")

    tag_case: Optional[Any] = None
    attr_case: Optional[Any] = None
    attr_quotes: Optional[Any] = None
    tag_nl: Optional[Any] = None
    place_cursor: Optional[Any] = None
    indent: Optional[Any] = None
    inline_break: Optional[Any] = None
    self_closing_tag: Optional[Any] = None
    filters: Optional[Any] = None


class ProfileResponseModel(BaseModel):
    name: Optional[str] = Field(
        default=None, description="Registered name; null for ad-hoc profiles."
    )
    options: Dict[str, Any]


class RenderRequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # a registered name or an inline options mapping
    profile: Union[str, Dict[str, Any]] = Field(default="plain")
    syntax: Optional[str] = Field(default=None)
    tag: str = Field(..., min_length=1)
    attribute: Optional[str] = Field(default=None)


class RenderResponseModel(BaseModel):
    tag: str
    attribute: Optional[str] = None
    quote: str
    self_closing: str
    cursor: str
