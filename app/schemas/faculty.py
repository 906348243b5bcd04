from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

class FacultyIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., max_length=120, pattern=EMAIL_PATTERN)
    department: str | None = Field(default=None, max_length=120)
    specializations: list[str] = Field(default_factory=list)

    @field_validator("specializations", mode="before")
    @classmethod
    def split_specializations(cls, value):
        # o formulário manda "ML, Algebra" como texto único
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(v).strip() for v in value if str(v).strip()]


class FacultyOut(BaseModel):
    id: str
    name: str
    email: str
    department: str | None = None
    specializations: list[str] = Field(default_factory=list)

    class Config:
        from_attributes = True
