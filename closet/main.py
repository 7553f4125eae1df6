import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from closet.core.config import settings
from closet.core.db import engine
from closet.routers import history, items, notifications, outfits

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger("closet.requests")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("starting %s env=%s", settings.APP_NAME, settings.APP_ENV)
    yield
    await engine.dispose()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(items.router, prefix=prefix)
app.include_router(outfits.router, prefix=prefix)
app.include_router(history.router, prefix=prefix)
app.include_router(notifications.router, prefix=prefix)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response


@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
