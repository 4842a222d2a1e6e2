from pydantic import BaseModel, Field, constr

from catalog.domain.models.video import Rating


class VideoBase(BaseModel):
    name: constr(min_length=1, max_length=255)
    description: str | None = None
    year_launched: int | None = Field(default=None, ge=1888)
    duration: int | None = Field(default=None, ge=0)
    opened: bool = False
    rating: Rating = Rating.L
    is_active: bool = True

class VideoCreate(VideoBase):
    pass

class VideoUpdate(BaseModel):
    name: constr(min_length=1, max_length=255) = None
    description: str | None = None
    year_launched: int | None = Field(default=None, ge=1888)
    duration: int | None = Field(default=None, ge=0)
    opened: bool = None
    rating: Rating = None
    is_active: bool = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "City Stories",
                "description": "A deep dive into urban design.",
                "year_launched": 2024,
                "duration": 94,
                "rating": "12",
            }
        }
    }
