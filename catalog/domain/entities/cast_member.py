from pydantic import BaseModel, constr

from catalog.domain.models.cast_member import CastMemberType


class CastMemberBase(BaseModel):
    name: constr(min_length=1, max_length=255)
    type: CastMemberType
    is_active: bool = True

class CastMemberCreate(CastMemberBase):
    pass

class CastMemberUpdate(BaseModel):
    name: constr(min_length=1, max_length=255) = None
    type: CastMemberType = None
    is_active: bool = None
