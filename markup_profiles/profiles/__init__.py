"""Output profile system."""

from markup_profiles.profiles.formatting import string_case
from markup_profiles.profiles.legacy import quote, self_closing
from markup_profiles.profiles.models import Profile, ProfileSummary
from markup_profiles.profiles.registry import (
    ProfileRegistry,
    get_profile_registry,
    reset_profile_registry,
)

__all__ = [
    "Profile",
    "ProfileSummary",
    "ProfileRegistry",
    "get_profile_registry",
    "reset_profile_registry",
    "string_case",
    "quote",
    "self_closing",
]
