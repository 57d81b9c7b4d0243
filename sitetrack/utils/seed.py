import time
from typing import Optional

from sqlalchemy.orm import Session

from sitetrack.db.models.assignment import ProjectAssignment
from sitetrack.db.models.client import Client
from sitetrack.db.models.photo import Photo
from sitetrack.db.models.project import Project
from sitetrack.db.models.user import User
from sitetrack.db.models.visit import Visit

DAY_MS = 24 * 60 * 60 * 1000


def seed_test_data(db: Session, now_ms: Optional[float] = None) -> dict:
    """Insert a small demo data set and return what was created."""
    now_ms = now_ms if now_ms is not None else time.time() * 1000

    acme = Client(name="Acme Construction", email="contact@acme-construction.com")
    homebuilder = Client(name="HomeBuilder Inc", email="info@homebuilder.com")
    db.add_all([acme, homebuilder])
    db.flush()

    office = Project(client_id=acme.id, name="Downtown Office Renovation",
                     address="123 Main St, San Francisco, CA 94102")
    new_build = Project(client_id=acme.id, name="Residential New Build",
                        address="456 Oak Avenue, Palo Alto, CA 94301")
    kitchen = Project(client_id=homebuilder.id, name="Kitchen Remodel",
                      address="789 Pine Lane, San Jose, CA 95101")
    db.add_all([office, new_build, kitchen])
    db.flush()

    visits = [
        Visit(project_id=office.id, date=now_ms - 7 * DAY_MS, exterior_type="video",
              youtube360_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
              notes="Initial site survey - captured full exterior"),
        Visit(project_id=office.id, date=now_ms - 3 * DAY_MS, exterior_type="splat",
              splat_url="https://lumalabs.ai/embed/example-splat-id",
              notes="Framing complete - 3D gaussian splat capture"),
        Visit(project_id=new_build.id, date=now_ms, exterior_type="video",
              video_url="https://example.com/videos/site-walkthrough.mp4",
              notes="Foundation inspection"),
    ]
    db.add_all(visits)

    # Assignments only when someone has already signed in
    user = db.query(User).first()
    assignments = []
    if user:
        assignments = [
            ProjectAssignment(project_id=office.id, user_id=user.id, role="operator"),
            ProjectAssignment(project_id=new_build.id, user_id=user.id, role="operator"),
        ]
        db.add_all(assignments)

    db.commit()

    return {
        "created": {
            "clients": 2,
            "projects": 3,
            "visits": len(visits),
            "project_assignments": len(assignments),
        },
        "ids": {
            "clients": [acme.id, homebuilder.id],
            "projects": [office.id, new_build.id, kitchen.id],
            "visits": [v.id for v in visits],
        },
    }


def clear_test_data(db: Session) -> dict:
    """Delete all tracked records, children before parents. Users are kept."""
    deleted = {}
    for key, model in (
        ("photos", Photo),
        ("visits", Visit),
        ("project_assignments", ProjectAssignment),
        ("projects", Project),
        ("clients", Client),
    ):
        records = db.query(model).all()
        for record in records:
            db.delete(record)
        db.commit()
        deleted[key] = len(records)
    return {"deleted": deleted}
