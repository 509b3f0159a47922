from fastapi import HTTPException, status
import typing as t

from core.config import CFG
from db.schemas import categories as schemas
from db.schemas.projects import Project, ProjectCategory, ProjectStatus

CATEGORY_INFO = {
    ProjectCategory.medical: (
        'Medical & Healthcare',
        'Mobile clinics, medical equipment, emergency treatments, and healthcare access for rural communities',
    ),
    ProjectCategory.education: (
        'Education',
        'School scholarships, educational materials, teacher training, and learning resources for all children',
    ),
    ProjectCategory.community: (
        'Community Development',
        'Water wells, infrastructure projects, community centers, and local development initiatives',
    ),
    ProjectCategory.disaster_relief: (
        'Disaster Relief',
        'Cyclone relief, flood recovery, emergency aid, and disaster preparedness for affected communities',
    ),
    ProjectCategory.animals: (
        'Wildlife & Environment',
        'Sea turtle conservation, leopard protection, forest preservation, and marine ecosystem restoration',
    ),
    ProjectCategory.technology: (
        'Technology Innovation',
        'AI wildlife monitoring, digital literacy programs, and tech solutions for social challenges',
    ),
    ProjectCategory.arts_culture: (
        'Arts & Culture',
        'Traditional dance festivals, cultural heritage preservation, and support for local artists',
    ),
    ProjectCategory.sports: (
        'Sports Development',
        'Cricket academies, sports equipment, youth training programs, and athletic facility development',
    ),
}


def summarize_category(db: t.Iterable[Project], category: ProjectCategory) -> schemas.CategorySummary:
    projects = [p for p in db if p.category == category]
    title, description = CATEGORY_INFO[category]
    return schemas.CategorySummary(
        category=category,
        title=title,
        description=description,
        projectCount=len(projects),
        activeCount=sum(1 for p in projects if p.status == ProjectStatus.active),
        totalRaised=sum(p.currentAmount for p in projects),
        currency=CFG.currency,
    )


def get_categories(db: t.Iterable[Project]) -> t.List[schemas.CategorySummary]:
    return [summarize_category(db, category) for category in ProjectCategory]


def get_category(db: t.Iterable[Project], category: str) -> schemas.CategorySummary:
    try:
        category = ProjectCategory(category.lower().replace('-', '_'))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="category not found")
    return summarize_category(db, category)
