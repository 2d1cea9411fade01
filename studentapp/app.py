import logging
import os

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from studentapp.core.config import Settings, get_settings
from studentapp.core.handlers import register_exception_handlers
from studentapp.core.logging import setup_logging
from studentapp.core.security import SecurityHeadersMiddleware
from studentapp.db.create_tables import create_all
from studentapp.db.session import build_engine, build_sessionmaker
from studentapp.repositories.student_repository import StudentRepository
from studentapp.routers import pages as pages_router
from studentapp.routers import students as students_router
from studentapp.services.student_service import StudentService

BASE = os.path.dirname(__file__)
TEMPLATES_DIR = os.path.join(BASE, "templates")

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own engine, repository and service."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_title)
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    register_exception_handlers(app)

    engine = build_engine(settings.database_url, echo=settings.db_echo)
    if settings.auto_create_tables:
        create_all(engine)
    repository = StudentRepository(build_sessionmaker(engine))

    app.state.settings = settings
    app.state.engine = engine
    app.state.student_service = StudentService(repository)
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    app.include_router(pages_router.router)
    app.include_router(students_router.router)

    logger.info("%s started (env=%s)", settings.app_title, settings.app_env)
    return app
