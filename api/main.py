import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from blogs import router as blogs_router
from comments import router as comments_router
from core import db, errors
from devtools import router as devtools_router
from posts import router as posts_router
from users import router as users_router


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # One Mongo client per process.
    await db.init_client()
    try:
        yield
    finally:
        await db.close_client()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, errors.request_validation_handler)
app.add_exception_handler(errors.FieldValidationError, errors.field_validation_handler)

app.include_router(blogs_router.router, tags=["blogs"])
app.include_router(posts_router.router, tags=["posts"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(users_router.router, tags=["users"])
app.include_router(devtools_router.router, tags=["testing"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "blogger-platform api"}
