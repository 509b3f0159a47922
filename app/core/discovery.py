import math
import typing as t

from core.config import CFG
from core.search import parse_search
from db.schemas.projects import (
    Project,
    ProjectQuery,
    ResultPage,
    SortDirection,
    SortOption,
    Suggestion,
)

################################
### PROJECT DISCOVERY ENGINE ###
################################
# Everything here is a pure function of (projects, query); the catalog is
# re-scanned on every call.


def trending_score(project: Project) -> float:
    return project.donorCount + project.percentFunded


SORT_KEYS = {
    SortOption.trending: trending_score,
    SortOption.newest: lambda p: p.createdAt,
    SortOption.ending_soon: lambda p: p.endDate,
    SortOption.most_funded: lambda p: p.currentAmount,
    SortOption.popular: lambda p: p.donorCount,
    SortOption.recently_launched: lambda p: p.launchedAt or p.startDate,
}

# closest deadline first, whatever direction was asked for
ALWAYS_ASCENDING = {SortOption.ending_soon}


def normalize_location(location: t.Optional[str]) -> t.Optional[str]:
    if not location or location == CFG.allLocations:
        return None
    return location


def in_funding_range(project: Project, low: float, high: t.Optional[float]) -> bool:
    # low > high simply matches nothing
    if project.fundingGoal < low:
        return False
    return high is None or project.fundingGoal <= high


def at_location(project: Project, location: t.Optional[str]) -> bool:
    if not location:
        return True
    if project.location is None:
        return False
    return location in (project.location.city, project.location.state)


def filter_projects(projects: t.Iterable[Project], query: ProjectQuery) -> t.List[Project]:
    term = parse_search(query.search)
    location = normalize_location(query.location)
    return [
        project for project in projects
        if (not query.categories or project.category in query.categories)
        and (not query.statuses or project.status in query.statuses)
        and in_funding_range(project, query.fundingMin, query.fundingMax)
        and at_location(project, location)
        and (term is None or term.matches(project))
    ]


def sort_projects(
    projects: t.Iterable[Project],
    sort_by: SortOption = SortOption.trending,
    direction: SortDirection = SortDirection.desc,
) -> t.List[Project]:
    # sorted() is stable for reverse=True as well, ties keep their input order
    key = SORT_KEYS[sort_by]
    if sort_by in ALWAYS_ASCENDING:
        return sorted(projects, key=key)
    return sorted(projects, key=key, reverse=(direction == SortDirection.desc))


def paginate(projects: t.Sequence[Project], page: int, page_size: int) -> ResultPage:
    visible = page * page_size
    total = len(projects)
    return ResultPage(
        projects=list(projects[:visible]),
        total=total,
        page=page,
        pageSize=page_size,
        hasMore=total > visible,
        remaining=max(total - visible, 0),
        totalPages=math.ceil(total / page_size),
    )


def query_projects(projects: t.Iterable[Project], query: t.Optional[ProjectQuery] = None) -> ResultPage:
    """
    Filter, sort and slice the catalog for one discovery request
    """
    query = query or ProjectQuery()
    filtered = filter_projects(projects, query)
    ordered = sort_projects(filtered, query.sortBy, query.sortDirection)
    return paginate(ordered, query.page, query.pageSize)


def suggest(
    projects: t.Sequence[Project],
    raw: t.Optional[str],
    project_limit: int = CFG.suggestProjects,
    category_limit: int = CFG.suggestCategories,
    creator_limit: int = CFG.suggestCreators,
) -> t.List[Suggestion]:
    """
    Type-ahead entries for the search box: projects first, then categories,
    then creators, each in catalog order
    """
    query = (raw or '').strip().lower()
    if len(query) < CFG.suggestMinLength:
        return []

    matching = [
        project for project in projects
        if query in project.title.lower()
        or query in project.description.lower()
        or query in project.creator.displayName.lower()
    ]
    suggestions = [
        Suggestion(type='project', label=project.title, value=project.id)
        for project in matching[:project_limit]
    ]

    categories = [c for c in dict.fromkeys(p.category.value for p in projects) if query in c.lower()]
    suggestions += [
        Suggestion(type='category', label=f"Category: {category.replace('_', ' ')}", value=f'category:{category}')
        for category in categories[:category_limit]
    ]

    creators = [c for c in dict.fromkeys(p.creator.displayName for p in projects) if query in c.lower()]
    suggestions += [
        Suggestion(type='creator', label=f'Creator: {creator}', value=f'creator:{creator}')
        for creator in creators[:creator_limit]
    ]

    return suggestions


class DiscoveryState:
    """
    Load-more cursor for one caller.  Any change to the filters or sort
    order starts again from the first page.
    """
    def __init__(self, projects: t.Sequence[Project], query: t.Optional[ProjectQuery] = None):
        self.projects = projects
        self.query = query or ProjectQuery()

    @property
    def result(self) -> ResultPage:
        return query_projects(self.projects, self.query)

    def update(self, **changes) -> ResultPage:
        changes.pop('page', None)
        if 'location' in changes:
            changes['location'] = normalize_location(changes['location'])
        updated = ProjectQuery(**{**self.query.model_dump(), **changes})
        if updated.model_dump() != self.query.model_dump():
            updated = updated.model_copy(update={'page': 1})
        self.query = updated
        return self.result

    def load_more(self) -> ResultPage:
        if self.result.hasMore:
            self.query = self.query.model_copy(update={'page': self.query.page + 1})
        return self.result

    def clear_filters(self) -> ResultPage:
        self.query = ProjectQuery(
            sortBy=self.query.sortBy,
            sortDirection=self.query.sortDirection,
            pageSize=self.query.pageSize,
        )
        return self.result

    def active_filter_count(self, funding_ceiling: float = CFG.fundingRangeMax) -> int:
        q = self.query
        narrowed = q.fundingMin > 0 or (q.fundingMax is not None and q.fundingMax < funding_ceiling)
        located = normalize_location(q.location) is not None
        return len(q.categories) + len(q.statuses) + (1 if located else 0) + (1 if narrowed else 0)
