import uvicorn

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from config import Stopwatch
from core.auth import get_current_active_user
from core.config import CFG, PROJECT_NAME, API_V1_STR
from core.session import SessionStore
from db.session import load_catalog
from utils.logger import logger, myself, LEIF

from api.v1.routes.users import users_router
from api.v1.routes.auth import auth_router
from api.v1.routes.projects import projects_router
from api.v1.routes.categories import categories_router
from api.v1.routes.campaigns import campaigns_router

DEBUG = CFG.debug


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(' Begin... ')
    app.state.catalog = load_catalog()
    app.state.sessions = SessionStore()
    app.state.sessions.open()
    yield
    app.state.sessions.close()
    logger.info('  Fin...  ')


app = FastAPI(
    title=PROJECT_NAME,
    docs_url=f"{API_V1_STR}/docs",
    openapi_url=API_V1_STR,
    lifespan=lifespan,
)

#region Routers
app.include_router(users_router,      prefix=f"{API_V1_STR}/users",      tags=["users"], dependencies=[Depends(get_current_active_user)])
app.include_router(auth_router,       prefix=f"{API_V1_STR}/auth",       tags=["auth"])
app.include_router(projects_router,   prefix=f"{API_V1_STR}/projects",   tags=["projects"])
app.include_router(categories_router, prefix=f"{API_V1_STR}/categories", tags=["categories"])
app.include_router(campaigns_router,  prefix=f"{API_V1_STR}/campaigns",  tags=["campaigns"])
#endregion Routers

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# all requests are timed and logged
@app.middleware("http")
async def add_logging_and_process_time(req: Request, call_next):
    try:
        with Stopwatch() as sw:
            resNext = await call_next(req)
        tot = str(round(sw.total_run_time * 1000))
        resNext.headers["X-Process-Time-MS"] = tot
        logger.log(LEIF, f"""{req.url}: {tot}ms""".strip())
        return resNext

    except Exception as e:
        logger.error(f'ERR:middleware:{myself()}: {e}')
        return JSONResponse(status_code=500, content={'status': 'error'})

@app.get("/api/ping")
async def ping():
    return {"hello": "world"}

# MAIN
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", reload=DEBUG, port=8000)
