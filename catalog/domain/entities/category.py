from pydantic import BaseModel, constr


class CategoryBase(BaseModel):
    name: constr(min_length=1, max_length=255)
    description: str | None = None
    is_active: bool = True

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(BaseModel):
    # absent means unchanged; null is only accepted where the column is nullable
    name: constr(min_length=1, max_length=255) = None
    description: str | None = None
    is_active: bool = None

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Documentary", "description": "Non-fiction films", "is_active": True}
        }
    }
