"""
Search box syntax.

    "clean water"         -> General('clean water')
    "category: medical"   -> ByCategory('medical')
    "creator:Priya"       -> ByCreator('priya')

Parsing happens once per query; matching is done per project.
"""
import typing as t
from dataclasses import dataclass

from db.schemas.projects import Project

CATEGORY_PREFIX = 'category:'
CREATOR_PREFIX = 'creator:'


@dataclass(frozen=True)
class General:
    text: str

    def matches(self, project: Project) -> bool:
        return any(self.text in field.lower() for field in (
            project.title,
            project.description,
            project.creator.displayName,
            project.category.value,
        ))


@dataclass(frozen=True)
class ByCategory:
    text: str

    def matches(self, project: Project) -> bool:
        return self.text in project.category.value.lower()


@dataclass(frozen=True)
class ByCreator:
    text: str

    def matches(self, project: Project) -> bool:
        return self.text in project.creator.displayName.lower()


SearchTerm = t.Union[General, ByCategory, ByCreator]


def parse_search(raw: t.Optional[str]) -> t.Optional[SearchTerm]:
    """
    Trim and lower-case the search box text and decide how it matches;
    None means there is nothing to search for
    """
    query = (raw or '').strip().lower()
    if not query:
        return None

    if query.startswith(CATEGORY_PREFIX):
        return ByCategory(query[len(CATEGORY_PREFIX):].strip())
    if query.startswith(CREATOR_PREFIX):
        return ByCreator(query[len(CREATOR_PREFIX):].strip())
    return General(query)
