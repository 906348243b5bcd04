from pydantic import BaseModel, Field

class CourseIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    code: str = Field(..., min_length=1, max_length=30)
    enrollment: int = Field(..., ge=1)
    duration_hours: int = Field(default=1, ge=1)
    description: str | None = None


class CourseOut(BaseModel):
    id: str
    name: str
    code: str
    enrollment: int
    duration_hours: int = 1
    description: str | None = None

    class Config:
        from_attributes = True
