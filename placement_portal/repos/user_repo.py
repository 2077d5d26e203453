import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from placement_portal.core.errors import DuplicateCollege, EmailAlreadyRegistered
from placement_portal.core.security import hash_password, generate_id
from placement_portal.models.college import College
from placement_portal.models.enums import Role
from placement_portal.models.job import Job
from placement_portal.models.user import User

logger = logging.getLogger(__name__)


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def _new_user(
    name: str,
    email: str,
    password: str,
    role: Role,
    college_id: str | None = None,
    company: str | None = None,
) -> User:
    return User(
        id=generate_id(),
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        college_id=college_id,
        company=company,
        skills=[] if role == Role.STUDENT else None,
    )


def create(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: Role,
    college_id: str | None = None,
    company: str | None = None,
) -> User:
    """Create a Student or Recruiter. College officers go through create_college_officer."""
    user = _new_user(name, email, password, role, college_id=college_id, company=company)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailAlreadyRegistered() from e
    db.refresh(user)
    return user


def create_college_officer(db: Session, name: str, email: str, password: str) -> User:
    """
    Create the College named after the registrant and the officer pointing at it
    in one transaction. An existing college name is rejected, never duplicated.
    """
    if db.query(College).filter(College.name == name).first():
        raise DuplicateCollege()
    college = College(id=generate_id(), name=name)
    db.add(college)
    try:
        db.flush()
        user = _new_user(name, email, password, Role.COLLEGE, college_id=college.id)
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # Lost a race on one of the unique columns; report whichever it was.
        if db.query(College).filter(College.name == name).first():
            raise DuplicateCollege() from e
        raise EmailAlreadyRegistered() from e
    db.refresh(user)
    logger.info("Created college %s (%s) for officer %s", college.name, college.id, email)
    return user


def update(
    db: Session,
    user_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    password_hash: str | None = None,
) -> User | None:
    user = get_by_id(db, user_id)
    if not user:
        return None
    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if password_hash is not None:
        user.password_hash = password_hash
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailAlreadyRegistered("Email already in use") from e
    db.refresh(user)
    return user


def update_student_profile(
    db: Session,
    user: User,
    *,
    name: str | None = None,
    branch: str | None = None,
    cgpa: float | None = None,
    skills: list[str] | None = None,
    resume: str | None = None,
) -> User:
    if name is not None:
        user.name = name
    if branch is not None:
        user.branch = branch
    if cgpa is not None:
        user.cgpa = cgpa
    if skills is not None:
        user.skills = list(skills)
    if resume is not None:
        user.resume = resume
    db.commit()
    db.refresh(user)
    return user


def get_students_of_college(db: Session, college_id: str) -> list[User]:
    return (
        db.query(User)
        .filter(User.college_id == college_id, User.role == Role.STUDENT)
        .order_by(User.name)
        .all()
    )


def get_recruiters_for_college(db: Session, college_id: str) -> list[User]:
    """Distinct recruiters that have posted at least one job to the college."""
    recruiter_ids = select(Job.recruiter_id).where(Job.college_id == college_id).distinct()
    return (
        db.query(User)
        .filter(User.id.in_(recruiter_ids), User.role == Role.RECRUITER)
        .order_by(User.name)
        .all()
    )


def save_job(db: Session, user: User, job: Job) -> bool:
    """Add job to the user's saved set. Returns False if it was already saved."""
    if any(saved.id == job.id for saved in user.saved_jobs):
        return False
    user.saved_jobs.append(job)
    db.commit()
    return True


def unsave_job(db: Session, user: User, job_id: str) -> bool:
    for saved in list(user.saved_jobs):
        if saved.id == job_id:
            user.saved_jobs.remove(saved)
            db.commit()
            return True
    return False
