from fastapi import APIRouter, Depends
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_studio_db
from services.studio_service.schemas import StudioProfileResponse, StudioProfileUpdate

router = APIRouter(prefix="/studio-profile", tags=["studio"])


@router.get("", response_model=StudioProfileResponse)
async def get_studio_profile(db: StudioDatabase = Depends(get_studio_db)):
    return await db.studio.get_profile()


@router.put("", response_model=StudioProfileResponse)
async def replace_studio_profile(
    profile_in: StudioProfileUpdate,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Replace the studio profile. Requires the settings permission.
    """
    return await db.studio.update_profile(profile_in)
