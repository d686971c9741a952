import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import models
from config import Settings, get_settings
from database import init_db, make_engine, make_session_factory
from logging_setup import setup_logging

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"
TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter()


# Dependency to get a DB session
def get_db(request: Request):
    db = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def task_description(request: Request) -> str:
    """The ``task`` form field, kept verbatim; an empty value is allowed."""
    form = await request.form()
    value = form.get("task")
    if not isinstance(value, str):
        raise HTTPException(status_code=422, detail="Form field 'task' is required")
    return value


@router.get("/", response_class=HTMLResponse)
def read_tasks(request: Request, db: Session = Depends(get_db)):
    tasks = db.query(models.Task).all()
    return templates.TemplateResponse(request, "index.html", {"tasks": tasks})


@router.post("/add", response_class=RedirectResponse)
def add_task(task: str = Depends(task_description), db: Session = Depends(get_db)):
    new_task = models.Task(description=task)
    db.add(new_task)
    db.commit()
    logger.info("Added task %s", new_task.id)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/delete/{task_id}", response_class=RedirectResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    # Absent ids delete zero rows; that is not an error.
    deleted = db.query(models.Task).filter(models.Task.id == task_id).delete()
    db.commit()
    logger.info("Deleted task %s (%d row(s))", task_id, deleted)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage operation failed on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(app.state.settings.log_level)
    init_db(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: storage, middleware, error mapping, routes, static files.

    Routes are registered before the static mount so ``/`` and friends win
    over files of the same name.
    """
    settings = settings or get_settings()
    app = FastAPI(title="To-Do List", lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = make_engine(settings.database_url)
    app.state.SessionLocal = make_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)

    app.include_router(router)
    app.mount("/", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
