from pydantic import BaseModel, constr


class GenreBase(BaseModel):
    name: constr(min_length=1, max_length=255)
    is_active: bool = True

class GenreCreate(GenreBase):
    pass

class GenreUpdate(BaseModel):
    name: constr(min_length=1, max_length=255) = None
    is_active: bool = None
