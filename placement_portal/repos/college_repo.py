from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from placement_portal.core.errors import DuplicateCollege
from placement_portal.core.security import generate_id
from placement_portal.models.college import College


def create(db: Session, name: str) -> College:
    college = College(id=generate_id(), name=name)
    db.add(college)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateCollege() from e
    db.refresh(college)
    return college


def get_all(db: Session) -> list[College]:
    return db.query(College).order_by(College.name).all()


def get_by_id(db: Session, college_id: str) -> College | None:
    return db.query(College).filter(College.id == college_id).first()


def get_by_name(db: Session, name: str) -> College | None:
    return db.query(College).filter(College.name == name).first()


def seed_colleges(db: Session, names: list[str]) -> tuple[list[College], int]:
    """
    Create each named college unless it already exists.
    Returns (colleges for all names, number_created).
    """
    colleges = []
    created = 0
    for raw in names:
        name = raw.strip()
        if not name:
            continue
        college = get_by_name(db, name)
        if college is None:
            college = create(db, name)
            created += 1
        colleges.append(college)
    return colleges, created
