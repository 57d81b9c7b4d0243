
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from sitetrack.core.security import Identity
from sitetrack.core.templates import templates
from sitetrack.crud import assignments, clients, dashboard, projects, users, visits
from sitetrack.routers import deps

router = APIRouter(tags=["pages"])

@router.get("/")
async def landing(request: Request):
    return templates.TemplateResponse(request, "index.html", {"error": request.query_params.get("error")})

@router.get("/dashboard")
async def dashboard_page(
    request: Request,
    db: Session = Depends(deps.get_db),
    identity: Identity = Depends(deps.get_dashboard_identity)
):
    user = users.get_current_user(db, identity)
    # Signed in but not yet synced from the identity provider: no assignments
    my_projects = assignments.get_user_projects(db, user.id) if user else []

    return templates.TemplateResponse(request, "dashboard/index.html", {
        "identity": identity,
        "user": user,
        "stats": dashboard.get_stats(db),
        "operator_projects": [p for p in my_projects if p.role == "operator"],
        "client_projects": [p for p in my_projects if p.role == "client"],
    })

@router.get("/dashboard/projects/{project_id}")
async def project_page(
    project_id: str,
    request: Request,
    db: Session = Depends(deps.get_db),
    identity: Identity = Depends(deps.get_dashboard_identity)
):
    project = projects.get_project(db, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    site_visits = sorted(visits.list_visits(db, project_id), key=lambda v: v.date, reverse=True)

    return templates.TemplateResponse(request, "dashboard/project.html", {
        "identity": identity,
        "project": project,
        "client": clients.get_client(db, project.client_id),
        "visits": site_visits,
    })
