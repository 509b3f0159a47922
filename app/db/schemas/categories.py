from pydantic import BaseModel

from db.schemas.projects import ProjectCategory


class CategorySummary(BaseModel):
    category: ProjectCategory
    title: str
    description: str
    projectCount: int
    activeCount: int
    totalRaised: float
    currency: str
