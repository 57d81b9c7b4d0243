import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sitetrack.crud.base import patch_record, delete_record
from sitetrack.db.models.assignment import ProjectAssignment
from sitetrack.db.models.project import Project
from sitetrack.db.models.user import User
from sitetrack.schemas.assignment import AssignmentCreate, AssignmentUpdate
from sitetrack.schemas.project import ProjectOut, ProjectWithRole
from sitetrack.schemas.user import UserOut, UserWithRole

logger = logging.getLogger(__name__)


def list_assignments(
    db: Session, project_id: Optional[str] = None, user_id: Optional[str] = None
) -> List[ProjectAssignment]:
    query = db.query(ProjectAssignment)
    if project_id:
        query = query.filter(ProjectAssignment.project_id == project_id)
    if user_id:
        query = query.filter(ProjectAssignment.user_id == user_id)
    return query.all()


def get_assignment(db: Session, assignment_id: str) -> Optional[ProjectAssignment]:
    return db.get(ProjectAssignment, assignment_id)


def get_assignment_for_pair(db: Session, project_id: str, user_id: str) -> Optional[ProjectAssignment]:
    return db.query(ProjectAssignment).filter(
        ProjectAssignment.user_id == user_id,
        ProjectAssignment.project_id == project_id,
    ).one_or_none()


def assign(db: Session, project_id: str, user_id: str, role: str) -> str:
    """Give ``user_id`` a role on ``project_id``, keeping one row per pair.

    An existing assignment has its role replaced in place. When a
    concurrent call inserts the pair first, the unique constraint rejects
    our insert and the winning row is updated instead.
    """
    existing = get_assignment_for_pair(db, project_id, user_id)
    if existing:
        existing.role = role
        db.commit()
        return existing.id

    assignment = ProjectAssignment(project_id=project_id, user_id=user_id, role=role)
    db.add(assignment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = get_assignment_for_pair(db, project_id, user_id)
        if existing is None:
            raise
        logger.info("Assignment for user %s on project %s created concurrently", user_id, project_id)
        existing.role = role
        db.commit()
        return existing.id
    return assignment.id


def create_assignment(db: Session, data: AssignmentCreate) -> str:
    return assign(db, data.project_id, data.user_id, data.role)


def update_assignment(db: Session, assignment_id: str, changes: AssignmentUpdate) -> str:
    return patch_record(db, ProjectAssignment, assignment_id, changes.model_dump(exclude_none=True))


def remove_assignment(db: Session, assignment_id: str) -> None:
    delete_record(db, ProjectAssignment, assignment_id)


def remove_assignment_for_pair(db: Session, project_id: str, user_id: str) -> None:
    assignment = get_assignment_for_pair(db, project_id, user_id)
    if assignment:
        db.delete(assignment)
        db.commit()


def get_user_projects(db: Session, user_id: str) -> List[ProjectWithRole]:
    # Assignments pointing at deleted projects are skipped
    rows = []
    for assignment in list_assignments(db, user_id=user_id):
        project = db.get(Project, assignment.project_id)
        if project is None:
            continue
        rows.append(ProjectWithRole(**ProjectOut.model_validate(project).model_dump(), role=assignment.role))
    return rows


def get_project_users(db: Session, project_id: str) -> List[UserWithRole]:
    rows = []
    for assignment in list_assignments(db, project_id=project_id):
        user = db.get(User, assignment.user_id)
        if user is None:
            continue
        rows.append(UserWithRole(**UserOut.model_validate(user).model_dump(), role=assignment.role))
    return rows
