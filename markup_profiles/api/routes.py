"""HTTP route handlers for the profile registry API."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from markup_profiles.profiles.models import Profile, ProfileSummary
from markup_profiles.profiles.registry import (
    FALLBACK_PROFILE,
    ProfileRegistry,
    get_profile_registry,
)

from .schemas import (
    ProfileOptionsModel,
    ProfileResponseModel,
    RenderRequestModel,
    RenderResponseModel,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _registered_name(registry: ProfileRegistry, profile: Profile) -> Optional[str]:
    for name in registry.get_available_ids():
        if registry.get(name) is profile:
            return name
    return None


@router.get("/v1/profiles", response_model=List[ProfileSummary])
async def list_profiles(
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> List[ProfileSummary]:
    return registry.list_profiles()


@router.get("/v1/profiles/{name}", response_model=ProfileResponseModel)
async def get_profile(
    name: str,
    syntax: Optional[str] = Query(default=None),
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> ProfileResponseModel:
    profile = registry.get(name, syntax)
    return ProfileResponseModel(
        name=_registered_name(registry, profile), options=profile.to_options()
    )


@router.put("/v1/profiles/{name}", response_model=ProfileResponseModel)
async def put_profile(
    name: str,
    options: ProfileOptionsModel,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> ProfileResponseModel:
    profile = registry.create(name, options.model_dump(exclude_unset=True))
    logger.info(f"Profile {name.lower()} created via API")
    return ProfileResponseModel(name=name.lower(), options=profile.to_options())


@router.delete("/v1/profiles/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(
    name: str,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> Response:
    if name.lower() == FALLBACK_PROFILE:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "fallback_profile", "profile": FALLBACK_PROFILE},
        )
    registry.remove(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/v1/render", response_model=RenderResponseModel)
async def render(
    request: RenderRequestModel,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> RenderResponseModel:
    profile = registry.get(request.profile, request.syntax)
    return RenderResponseModel(
        tag=profile.tag_name(request.tag),
        attribute=(
            profile.attribute_name(request.attribute)
            if request.attribute is not None
            else None
        ),
        quote=profile.attribute_quote(),
        self_closing=profile.self_closing(),
        cursor=profile.cursor(),
    )
