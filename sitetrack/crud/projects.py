from typing import List, Optional

from sqlalchemy.orm import Session

from sitetrack.crud.base import insert_record, patch_record, delete_record
from sitetrack.db.models.client import Client
from sitetrack.db.models.project import Project
from sitetrack.schemas.client import ClientSummary
from sitetrack.schemas.project import ProjectCreate, ProjectUpdate, ProjectOut, ProjectWithClient


def list_projects(db: Session, client_id: Optional[str] = None) -> List[Project]:
    query = db.query(Project)
    if client_id:
        query = query.filter(Project.client_id == client_id)
    return query.all()


def list_projects_with_client(db: Session) -> List[ProjectWithClient]:
    """Every project with a ``{name, email}`` view of its client.

    A project whose client no longer resolves is kept, with ``client`` set
    to None.
    """
    rows = []
    for project in db.query(Project).all():
        client = db.get(Client, project.client_id)
        rows.append(ProjectWithClient(
            **ProjectOut.model_validate(project).model_dump(),
            client=ClientSummary(name=client.name, email=client.email) if client else None,
        ))
    return rows


def get_project(db: Session, project_id: str) -> Optional[Project]:
    return db.get(Project, project_id)


def create_project(db: Session, data: ProjectCreate) -> str:
    return insert_record(db, Project(client_id=data.client_id, name=data.name, address=data.address))


def update_project(db: Session, project_id: str, changes: ProjectUpdate) -> str:
    return patch_record(db, Project, project_id, changes.model_dump(exclude_none=True))


def remove_project(db: Session, project_id: str) -> None:
    # Visits and assignments stay reachable by id
    delete_record(db, Project, project_id)
