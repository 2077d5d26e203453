from pydantic import BaseModel, field_validator

from placement_portal.schemas.common import none_as_empty, split_tags


class ProjectCreate(BaseModel):
    name: str
    description: str
    tech: list[str] | str | None = None
    link: str | None = None

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @field_validator("tech")
    @classmethod
    def normalize_tech(cls, v):
        return split_tags(v)


class ProjectUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    tech: list[str] | str | None = None
    link: str | None = None

    @field_validator("tech")
    @classmethod
    def normalize_tech(cls, v):
        if v is None:
            return None
        return split_tags(v)


class ProjectResponse(BaseModel):
    id: str
    name: str
    description: str
    tech: list[str] = []
    link: str | None = None

    class Config:
        from_attributes = True

    coerce_tech = field_validator("tech", mode="before")(none_as_empty)
