from pydantic import BaseModel


def split_tags(value) -> list[str]:
    """Accept a list or a comma-separated string; strip, drop blanks and repeats, keep order."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else list(value)
    seen: dict[str, None] = {}
    for item in items:
        tag = str(item).strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


class CollegeSummary(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class PartySummary(BaseModel):
    id: str
    name: str
    email: str
    company: str | None = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str


def none_as_empty(v):
    return [] if v is None else v
