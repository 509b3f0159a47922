from fastapi import APIRouter, Depends, HTTPException, status
import typing as t
from starlette.responses import JSONResponse

from db.session import get_db
from db.crud.categories import get_categories, get_category
from db.schemas.categories import CategorySummary
from utils.logger import logger, myself

categories_router = r = APIRouter()


@r.get(
    "/",
    response_model=t.List[CategorySummary],
    name="categories:all-categories"
)
async def categories_list(db=Depends(get_db)):
    """
    Get every category with its project totals
    """
    try:
        return get_categories(db)
    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')


@r.get(
    "/{category}",
    response_model=CategorySummary,
    name="categories:category-details"
)
async def category_details(category: str, db=Depends(get_db)):
    try:
        return get_category(db, category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'{str(e)}')
