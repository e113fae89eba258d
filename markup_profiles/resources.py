"""Syntax-scoped resource lookups consulted during profile resolution."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from markup_profiles.config import Settings

logger = logging.getLogger(__name__)


class SyntaxResources(Protocol):
    """Source of per-syntax settings subsets (e.g. a syntax's profile name)."""

    def get_subset(self, syntax: str, name: str) -> Optional[Any]:
        ...


class MappingResources:
    """Resources backed by a ``{syntax: {subset_name: value}}`` mapping."""

    def __init__(self, data: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._data: Dict[str, Dict[str, Any]] = {
            syntax: dict(subsets) for syntax, subsets in (data or {}).items()
        }

    def get_subset(self, syntax: str, name: str) -> Optional[Any]:
        return self._data.get(syntax, {}).get(name)

    def set_subset(self, syntax: str, name: str, value: Any) -> None:
        self._data.setdefault(syntax, {})[name] = value
        logger.debug(f"Resource {syntax}.{name} set to {value!r}")


def resources_from_settings(settings: Settings) -> MappingResources:
    """Build resources holding the configured per-syntax profile overrides."""
    return MappingResources(
        {syntax: {"profile": profile} for syntax, profile in settings.syntax_profiles.items()}
    )
