from pydantic import BaseModel, Field

class RoomIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    capacity: int = Field(..., ge=1)
    building: str | None = Field(default=None, max_length=120)
    floor: int | None = None
    has_projector: bool = False
    has_computers: bool = False


class RoomOut(BaseModel):
    id: str
    name: str
    capacity: int
    building: str | None = None
    floor: int = 1
    has_projector: bool = False
    has_computers: bool = False

    class Config:
        from_attributes = True
