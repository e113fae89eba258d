"""Profile registry: creation, resolution and loading of output profiles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from markup_profiles.config import get_settings
from markup_profiles.profiles.models import CaretProvider, Profile, ProfileSummary
from markup_profiles.resources import SyntaxResources, resources_from_settings

logger = logging.getLogger(__name__)

FALLBACK_PROFILE = "plain"

BUILTIN_PROFILES: Dict[str, Dict[str, Any]] = {
    "xhtml": {},
    "html": {"self_closing_tag": False},
    "xml": {"self_closing_tag": True, "tag_nl": True},
    "plain": {"tag_nl": False, "indent": False, "place_cursor": False},
}


class ProfileRegistry:
    """Registry of named output profiles, keyed by lowercase name."""

    def __init__(
        self,
        resources: Optional[SyntaxResources] = None,
        caret: Optional[CaretProvider] = None,
    ) -> None:
        self._profiles: Dict[str, Profile] = {}
        self._resources = resources
        self._caret = caret
        self.bootstrap()

    def bootstrap(self) -> None:
        """Register the built-in profiles."""
        for name, options in BUILTIN_PROFILES.items():
            self.create(name, options)

    def create(self, name: str, options: Optional[Mapping[str, Any]] = None) -> Profile:
        """
        Create a new output profile and add it to the registry.

        An existing profile with the same name is replaced.

        Args:
            name: Profile name, stored lowercased
            options: Profile options merged over the defaults

        Returns:
            New profile
        """
        profile = self.build(options)
        self._profiles[name.lower()] = profile
        logger.debug(f"Registered profile: {name.lower()}")
        return profile

    def build(self, options: Optional[Mapping[str, Any]] = None) -> Profile:
        """Create a profile object only, without registering it."""
        return Profile.from_options(options or {}, caret=self._caret)

    def get(self, name: Any, syntax: Optional[str] = None) -> Profile:
        """
        Get a profile by name. Falls back to the 'plain' profile.

        Args:
            name: Profile name. Might be a profile or an options mapping itself
            syntax: Current editor syntax. If defined, the syntax resources
                are searched first, then the registered profiles

        Returns:
            Resolved profile
        """
        if syntax and isinstance(name, str) and self._resources is not None:
            override = self._resources.get_subset(syntax, "profile")
            if override:
                name = override

        if isinstance(name, str) and name.lower() in self._profiles:
            return self._profiles[name.lower()]

        if isinstance(name, Profile):
            return name

        if isinstance(name, Mapping) and "tag_case" in name:
            return self.build(name)

        return self._profiles[FALLBACK_PROFILE]

    def remove(self, name: Optional[str]) -> None:
        """Delete the profile with the given name, if present."""
        key = (name or "").lower()
        if key in self._profiles:
            del self._profiles[key]
            logger.debug(f"Removed profile: {key}")

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._profiles

    def list_profiles(self) -> List[ProfileSummary]:
        """
        Get summary information about all registered profiles.

        Returns:
            List of profile summaries
        """
        return [
            ProfileSummary(
                name=name,
                tag_case=profile.tag_case,
                attr_case=profile.attr_case,
                self_closing_tag=profile.self_closing_tag,
                filters=profile.filters,
            )
            for name, profile in self._profiles.items()
        ]

    def get_available_ids(self) -> List[str]:
        """Get list of registered profile names."""
        return list(self._profiles.keys())

    def clear(self) -> None:
        """Drop all profiles and restore the built-ins."""
        self._profiles.clear()
        self.bootstrap()

    def load_from_directory(self, profiles_dir: str | Path) -> List[str]:
        """
        Load all YAML profiles from the specified directory.

        A file holds either a single profile (``name`` plus optional
        ``options``) or a mapping of profile names to their options.

        Args:
            profiles_dir: Path to directory containing profile YAML files

        Returns:
            Names of the registered profiles

        Raises:
            yaml.YAMLError: If a profile file cannot be parsed
        """
        profiles_path = Path(profiles_dir)
        if not profiles_path.exists():
            logger.warning(f"Profiles directory not found: {profiles_dir}")
            return []

        if not profiles_path.is_dir():
            logger.error(f"Profiles path is not a directory: {profiles_dir}")
            return []

        loaded_profiles: List[str] = []
        for yaml_file in sorted(profiles_path.glob("*.yaml")):
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"YAML parse error in {yaml_file}: {e}")
                raise

            if not data:
                logger.warning(f"Empty profile file: {yaml_file}")
                continue

            if not isinstance(data, Mapping):
                logger.warning(f"Profile file is not a mapping, skipped: {yaml_file}")
                continue

            if isinstance(data.get("name"), str):
                entries = {data["name"]: data.get("options")}
            else:
                entries = data

            for name, options in entries.items():
                if options is not None and not isinstance(options, Mapping):
                    logger.warning(f"Options for profile {name} in {yaml_file} ignored")
                    options = None
                self.create(str(name), options)
                loaded_profiles.append(str(name).lower())

        if loaded_profiles:
            logger.info(f"Profiles loaded: {', '.join(loaded_profiles)}")
        else:
            logger.info("No profiles loaded")
        return loaded_profiles


# Global registry instance
_registry: Optional[ProfileRegistry] = None


def get_profile_registry() -> ProfileRegistry:
    """Get the global profile registry instance."""
    global _registry
    if _registry is None:
        settings = get_settings()
        _registry = ProfileRegistry(resources=resources_from_settings(settings))
        if settings.profiles_dir:
            _registry.load_from_directory(settings.profiles_dir)
    return _registry


def reset_profile_registry() -> None:
    """Forget the global registry; the next access builds a fresh one."""
    global _registry
    _registry = None
