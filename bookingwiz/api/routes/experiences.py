"""Experience endpoints."""

from fastapi import APIRouter

from bookingwiz.api.deps import StorageDep
from bookingwiz.core.exceptions import NotFoundError, internal_errors
from bookingwiz.models import Experience
from bookingwiz.schemas.experience import ExperienceResponse

router = APIRouter()


@router.get("", response_model=list[ExperienceResponse])
async def list_experiences(storage: StorageDep) -> list[Experience]:
    """List the experience catalog in catalog order."""
    with internal_errors("fetching experiences"):
        return storage.get_all_experiences()


@router.get("/{experience_id}", response_model=ExperienceResponse)
async def get_experience(experience_id: str, storage: StorageDep) -> Experience:
    """Get a single experience."""
    with internal_errors("fetching experience"):
        experience = storage.get_experience(experience_id)
    if not experience:
        raise NotFoundError("Experience")
    return experience
