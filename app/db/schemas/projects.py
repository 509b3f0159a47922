from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
import typing as t

### SCHEMAS FOR PROJECTS ###


class ProjectCategory(str, Enum):
    medical = 'medical'
    education = 'education'
    technology = 'technology'
    community = 'community'
    disaster_relief = 'disaster_relief'
    animals = 'animals'
    arts_culture = 'arts_culture'
    sports = 'sports'


class ProjectStatus(str, Enum):
    draft = 'draft'
    pending_review = 'pending_review'
    active = 'active'
    paused = 'paused'
    completed = 'completed'
    cancelled = 'cancelled'
    failed = 'failed'


class FundingType(str, Enum):
    all_or_nothing = 'all_or_nothing'
    keep_what_you_raise = 'keep_what_you_raise'
    recurring = 'recurring'


class SortOption(str, Enum):
    trending = 'trending'
    newest = 'newest'
    ending_soon = 'ending_soon'
    most_funded = 'most_funded'
    popular = 'popular'
    recently_launched = 'recently_launched'


class SortDirection(str, Enum):
    asc = 'asc'
    desc = 'desc'


class Creator(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    displayName: str
    verificationStatus: str = 'unverified'
    rating: float = 0
    location: t.Optional[str] = None


class ProjectLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    state: t.Optional[str] = None
    city: t.Optional[str] = None


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    description: str
    shortDescription: str = ''
    category: ProjectCategory
    tags: t.Tuple[str, ...] = ()
    creator: Creator
    fundingGoal: float = Field(ge=0)
    currentAmount: float = Field(0, ge=0)
    currency: str = 'LKR'
    fundingType: FundingType = FundingType.all_or_nothing
    donorCount: int = Field(0, ge=0)
    status: ProjectStatus
    startDate: datetime
    endDate: datetime
    createdAt: datetime
    updatedAt: datetime
    launchedAt: t.Optional[datetime] = None
    location: t.Optional[ProjectLocation] = None
    featured: bool = False
    trending: bool = False
    urgent: bool = False

    @computed_field
    @property
    def percentFunded(self) -> float:
        # not capped, over-funded projects report more than 100
        if not self.fundingGoal:
            return 0.0
        return self.currentAmount / self.fundingGoal * 100

    @computed_field
    @property
    def isFullyFunded(self) -> bool:
        return self.fundingGoal > 0 and self.currentAmount >= self.fundingGoal

    @model_validator(mode='after')
    def check_timeline(self):
        if self.status != ProjectStatus.draft and self.endDate <= self.startDate:
            raise ValueError(f'project {self.id} ends before it starts')
        return self


class ProjectQuery(BaseModel):
    """
    One discovery request: filters, sort order and load-more position
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    search: str = ''
    categories: t.FrozenSet[ProjectCategory] = frozenset()
    statuses: t.FrozenSet[ProjectStatus] = frozenset()
    fundingMin: float = 0
    fundingMax: t.Optional[float] = None
    location: t.Optional[str] = None
    sortBy: SortOption = SortOption.trending
    sortDirection: SortDirection = SortDirection.desc
    pageSize: int = Field(12, ge=1)
    page: int = Field(1, ge=1)


class ResultPage(BaseModel):
    projects: t.List[Project]
    total: int
    page: int
    pageSize: int
    hasMore: bool
    remaining: int
    totalPages: int


class Suggestion(BaseModel):
    type: t.Literal['project', 'category', 'creator']
    label: str
    # search text to apply, or the project id for project suggestions
    value: str


class PlatformStats(BaseModel):
    totalProjects: int
    activeProjects: int
    completedProjects: int
    totalDonors: int
    totalRaised: float
    successRate: float
    currency: str


class RecentSearch(BaseModel):
    query: str = Field(min_length=1)
