from fastapi import HTTPException, status
import typing as t

from core.config import CFG
from db.schemas import projects as schemas
from db.schemas.projects import ProjectStatus

####################################
### CATALOG LOOKUPS FOR PROJECTS ###
####################################


def get_projects(
    db: t.Iterable[schemas.Project], include_drafts: bool = False, skip: int = 0, limit: int = 100
) -> t.List[schemas.Project]:
    projects = list(db)
    if not include_drafts:
        projects = [p for p in projects if p.status != ProjectStatus.draft]
    return projects[skip:skip + limit]


def get_project(db: t.Iterable[schemas.Project], id: str) -> schemas.Project:
    id = str(id)
    for project in db:
        if project.id == id:
            return project
    # not an id, try the slug
    for project in db:
        if project.slug == id.lower():
            return project
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="project not found")


def get_featured_projects(db: t.Iterable[schemas.Project], limit: int = CFG.featuredLimit) -> t.List[schemas.Project]:
    return [p for p in db if p.featured][:limit]


def get_urgent_projects(db: t.Iterable[schemas.Project], limit: int = CFG.featuredLimit) -> t.List[schemas.Project]:
    return [p for p in db if p.urgent and p.status == ProjectStatus.active][:limit]


def get_platform_stats(db: t.Iterable[schemas.Project]) -> schemas.PlatformStats:
    projects = list(db)
    completed = [p for p in projects if p.status == ProjectStatus.completed]
    # success rate only counts projects that have finished one way or another
    finished = [p for p in projects if p.status in (ProjectStatus.completed, ProjectStatus.failed, ProjectStatus.cancelled)]

    return schemas.PlatformStats(
        totalProjects=len(projects),
        activeProjects=sum(1 for p in projects if p.status == ProjectStatus.active),
        completedProjects=len(completed),
        totalDonors=sum(p.donorCount for p in projects),
        totalRaised=sum(p.currentAmount for p in projects),
        successRate=round(len(completed) / len(finished) * 100, 1) if finished else 0.0,
        currency=CFG.currency,
    )
