import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from placement_portal.core.authorization import authorize_role
from placement_portal.core.errors import InvalidSession, Unauthenticated
from placement_portal.core.security import decode_access_token
from placement_portal.database import get_db
from placement_portal.models.enums import Role
from placement_portal.models.user import User
from placement_portal.repos.user_repo import get_by_id

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    if not credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise Unauthenticated("Not authorized, no token")
    try:
        user_id, role = decode_access_token(credentials.credentials)
    except InvalidSession:
        logger.info("Auth failed: invalid or expired token")
        raise
    user = get_by_id(db, user_id)
    if not user:
        logger.info("Auth failed: user from token not found")
        raise Unauthenticated("User not found")
    if user.role != role:
        logger.info("Auth failed: token role %s does not match user %s", role.value, user.id)
        raise InvalidSession()
    return user


def require_roles(*roles: Role):
    """Build a dependency that resolves the caller and admits only the given roles."""
    allowed = frozenset(roles)

    def dependency(user: User = Depends(get_current_user)) -> User:
        return authorize_role(user, allowed)

    dependency.__name__ = "require_" + "_or_".join(sorted(r.value.lower() for r in allowed))
    return dependency


get_current_student = require_roles(Role.STUDENT)
get_current_college = require_roles(Role.COLLEGE)
get_current_recruiter = require_roles(Role.RECRUITER)
