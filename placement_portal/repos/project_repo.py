from sqlalchemy.orm import Session

from placement_portal.core.security import generate_id
from placement_portal.models.project import Project


def create(
    db: Session,
    owner_id: str,
    name: str,
    description: str,
    tech: list[str] | None = None,
    link: str | None = None,
) -> Project:
    project = Project(
        id=generate_id(),
        owner_id=owner_id,
        name=name,
        description=description,
        tech=list(tech or []),
        link=link,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def get_by_id(db: Session, project_id: str) -> Project | None:
    return db.query(Project).filter(Project.id == project_id).first()


def get_for_owner(db: Session, owner_id: str) -> list[Project]:
    return db.query(Project).filter(Project.owner_id == owner_id).order_by(Project.created_at).all()


def update(
    db: Session,
    project: Project,
    *,
    name: str | None = None,
    description: str | None = None,
    tech: list[str] | None = None,
    link: str | None = None,
) -> Project:
    if name is not None:
        project.name = name
    if description is not None:
        project.description = description
    if tech is not None:
        project.tech = list(tech)
    if link is not None:
        project.link = link or None
    db.commit()
    db.refresh(project)
    return project


def delete(db: Session, project: Project) -> None:
    db.delete(project)
    db.commit()
