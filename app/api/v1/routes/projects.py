import typing as t

from fastapi import APIRouter, Depends, HTTPException, Query, status
from starlette.responses import JSONResponse

from core.auth import get_current_session
from core.config import CFG
from core.discovery import normalize_location, query_projects, suggest
from core.session import UserSession
from db.session import get_db
from db.crud.projects import (
    get_featured_projects,
    get_platform_stats,
    get_project,
    get_projects,
    get_urgent_projects,
)
from db.schemas.projects import (
    PlatformStats,
    Project,
    ProjectCategory,
    ProjectQuery,
    ProjectStatus,
    RecentSearch,
    ResultPage,
    SortDirection,
    SortOption,
    Suggestion,
)
from utils.logger import logger, myself

projects_router = r = APIRouter()


@r.get(
    "/",
    response_model=ResultPage,
    name="projects:discover"
)
def projects_discover(
    search: str = '',
    category: t.Annotated[t.List[ProjectCategory], Query()] = [],
    status_: t.Annotated[t.List[ProjectStatus], Query(alias='status')] = [],
    fundingMin: float = 0,
    fundingMax: t.Optional[float] = None,
    location: t.Optional[str] = None,
    sortBy: SortOption = SortOption.trending,
    sortDirection: SortDirection = SortDirection.desc,
    pageSize: t.Annotated[int, Query(ge=1)] = CFG.projectsPerPage,
    page: t.Annotated[int, Query(ge=1)] = 1,
    db=Depends(get_db),
):
    """
    Filter, sort and page through the catalog
    """
    try:
        query = ProjectQuery(
            search=search,
            categories=category,
            statuses=status_,
            fundingMin=fundingMin,
            fundingMax=fundingMax,
            location=normalize_location(location),
            sortBy=sortBy,
            sortDirection=sortDirection,
            pageSize=pageSize,
            page=page,
        )
        return query_projects(db, query)
    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')


@r.get(
    "/all",
    response_model=t.List[Project],
    response_model_exclude_none=True,
    name="projects:all-projects"
)
def projects_list(
    include_drafts: bool = False,
    db=Depends(get_db),
):
    """
    Get all projects, in catalog order
    """
    try:
        return get_projects(db, include_drafts)
    except Exception as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')


@r.get(
    "/suggestions",
    response_model=t.List[Suggestion],
    name="projects:suggestions"
)
def projects_suggestions(
    q: str = '',
    db=Depends(get_db),
):
    """
    Search box type-ahead
    """
    try:
        return suggest(db.projects, q)
    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')


@r.get(
    "/featured",
    response_model=t.List[Project],
    response_model_exclude_none=True,
    name="projects:featured"
)
def projects_featured(db=Depends(get_db)):
    return get_featured_projects(db)


@r.get(
    "/urgent",
    response_model=t.List[Project],
    response_model_exclude_none=True,
    name="projects:urgent"
)
def projects_urgent(db=Depends(get_db)):
    return get_urgent_projects(db)


@r.get("/stats", response_model=PlatformStats, name="projects:stats")
def projects_stats(db=Depends(get_db)):
    """
    Platform totals for the landing page
    """
    return get_platform_stats(db)


@r.get("/searches/recent", response_model=t.List[str], name="projects:recent-searches")
async def recent_searches(session: UserSession = Depends(get_current_session)):
    return session.recent_searches


@r.post("/searches/recent", response_model=t.List[str], name="projects:remember-search")
async def remember_search(
    search: RecentSearch,
    session: UserSession = Depends(get_current_session),
):
    return session.remember_search(search.query)


@r.delete("/searches/recent", response_model=t.List[str], name="projects:forget-search")
async def forget_search(
    query: str,
    session: UserSession = Depends(get_current_session),
):
    return session.forget_search(query)


@r.get(
    "/{id}",
    response_model=Project,
    response_model_exclude_none=True,
    name="projects:project-details"
)
def project_details(
    id: str,
    db=Depends(get_db),
):
    """
    Get any project details, by id or slug
    """
    try:
        return get_project(db, id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')
