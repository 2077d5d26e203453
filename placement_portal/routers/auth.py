import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from placement_portal.core.errors import (
    EmailAlreadyRegistered,
    NotFound,
    PortalError,
    Unauthenticated,
    UpstreamFailure,
)
from placement_portal.core.security import verify_password, create_access_token, hash_password
from placement_portal.database import get_db
from placement_portal.dependencies import get_current_user
from placement_portal.models.enums import Role
from placement_portal.models.user import User
from placement_portal.repos.college_repo import get_by_id as get_college
from placement_portal.repos.user_repo import (
    get_by_email,
    get_by_id,
    create as create_user,
    create_college_officer,
    update as update_user,
)
from placement_portal.schemas.auth import (
    UserRegister,
    UserLogin,
    Token,
    UserResponse,
    UserProfileUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        college_id=user.college_id,
        company=user.company,
    )


def _issue_token(user: User) -> Token:
    token = create_access_token(user.id, user.role)
    return Token(access_token=token, user=_user_to_response(user))


@router.post("/register", response_model=Token)
def register(data: UserRegister, db: Session = Depends(get_db)):
    try:
        if get_by_email(db, data.email):
            raise EmailAlreadyRegistered("User already exists")

        if data.role == Role.COLLEGE:
            user = create_college_officer(db, data.name, data.email, data.password)
        elif data.role == Role.STUDENT:
            if not get_college(db, data.college.strip()):
                raise NotFound("College not found")
            user = create_user(db, data.name, data.email, data.password, Role.STUDENT, college_id=data.college.strip())
        elif data.role == Role.RECRUITER:
            user = create_user(db, data.name, data.email, data.password, Role.RECRUITER, company=data.company.strip())
        else:
            raise NotFound(f"Unknown role {data.role!r}")

        logger.info("User registered: %s as %s", user.email, user.role.value)
        return _issue_token(user)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise UpstreamFailure("Registration failed") from e


@router.post("/login", response_model=Token)
def login(data: UserLogin, db: Session = Depends(get_db)):
    try:
        user = get_by_email(db, data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.info("Login refused for %s", data.email)
            raise Unauthenticated("Invalid email or password")
        logger.info("User logged in: %s", user.email)
        return _issue_token(user)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise UpstreamFailure("Login failed") from e


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    return _user_to_response(user)


@router.patch("/me", response_model=UserResponse)
def update_account(
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Change name, email or password. The password is re-hashed; the old one must be supplied."""
    try:
        if data.new_password is not None and not verify_password(data.current_password, user.password_hash):
            raise Unauthenticated("Current password is incorrect")

        changes = {}
        if data.email is not None and data.email != user.email:
            if get_by_email(db, data.email):
                raise EmailAlreadyRegistered("Email already in use")
            changes["email"] = data.email
        if data.name is not None and data.name.strip():
            changes["name"] = data.name.strip()
        if data.new_password is not None:
            changes["password_hash"] = hash_password(data.new_password)

        # One commit, so a failure leaves the account untouched
        if changes:
            update_user(db, user.id, **changes)
            if "password_hash" in changes:
                logger.info("Password changed for user=%s", user.id)

        user = get_by_id(db, user.id)
        return _user_to_response(user)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Account update failed for user=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to update account") from e
