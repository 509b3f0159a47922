from datetime import datetime
from fastapi import Request
import typing as t

from db.schemas.projects import Project
from db.seed import seed_projects
from utils.logger import logger, myself


class Catalog:
    """
    Read-only, in-memory collection of projects; loaded once at startup
    """
    def __init__(self, projects: t.Iterable[Project]):
        self.projects = tuple(projects)

    def __iter__(self):
        return iter(self.projects)

    def __len__(self):
        return len(self.projects)


def load_catalog(now: t.Optional[datetime] = None) -> Catalog:
    catalog = Catalog(seed_projects(now))
    logger.info(f'{myself()}: {len(catalog)} projects')
    return catalog


# Dependency
def get_db(request: Request) -> Catalog:
    return request.app.state.catalog
