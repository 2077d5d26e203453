from pydantic import BaseModel, EmailStr, field_validator, model_validator

from placement_portal.models.enums import Role

PASSWORD_MIN_LENGTH = 6


def _long_enough(password: str, label: str = "Password") -> str:
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"{label} must be at least {PASSWORD_MIN_LENGTH} characters")
    return password


class UserRegister(BaseModel):
    """Sign-up payload. Students name the college they belong to, recruiters their company."""

    name: str
    email: EmailStr
    password: str
    role: Role
    college: str | None = None
    company: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return _long_enough(v)

    @model_validator(mode="after")
    def role_specific_fields(self):
        missing = {
            Role.STUDENT: ("college", "A valid College ID is required for students"),
            Role.RECRUITER: ("company", "Company is required for recruiters"),
        }.get(self.role)
        if missing and not (getattr(self, missing[0]) or "").strip():
            raise ValueError(missing[1])
        return self


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    college_id: str | None = None
    company: str | None = None

    class Config:
        from_attributes = True


class UserProfileUpdate(BaseModel):
    name: str | None = None
    email: EmailStr | None = None
    current_password: str | None = None
    new_password: str | None = None
    confirm_new_password: str | None = None

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, v: str | None) -> str | None:
        return v if v is None else _long_enough(v, "New password")

    @model_validator(mode="after")
    def password_change_complete(self):
        if self.new_password is None:
            return self
        if not self.current_password:
            raise ValueError("Current password is required to set a new password")
        if self.new_password != self.confirm_new_password:
            raise ValueError("New password and confirmation do not match")
        return self


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
