from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class StudioProfileBase(BaseModel):
    name: str
    email: Optional[EmailStr] = None
    phone: str = ""
    address: str = ""
    website: str = ""
    description: str = ""


class StudioProfileUpdate(StudioProfileBase):
    """Full replacement; omitted fields are cleared."""


class StudioProfileResponse(StudioProfileBase):
    model_config = ConfigDict(from_attributes=True)
