import logging

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.services.coordinator import TimetableCoordinator
from app.services.store import SqlAlchemyStore

from app import models  # noqa: F401  registra as tabelas no Base.metadata

from app.api.routes.courses import router as courses_router
from app.api.routes.faculty import router as faculty_router
from app.api.routes.rooms import router as rooms_router
from app.api.routes.timetable import router as timetable_router

logger = logging.getLogger(__name__)


def create_app(session_factory=SessionLocal, bind: Engine = engine) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Timetable API", version="0.1.0")

    # o store é injetado aqui: nada de cliente global escondido no core
    app.state.coordinator = TimetableCoordinator(SqlAlchemyStore(session_factory))

    app.include_router(courses_router)
    app.include_router(faculty_router)
    app.include_router(rooms_router)
    app.include_router(timetable_router)

    @app.on_event("startup")
    def ensure_tables():
        if not settings.CREATE_TABLES:
            return
        Base.metadata.create_all(bind=bind)
        logger.info("[BOOTSTRAP] tables OK (%s)", bind.url.render_as_string(hide_password=True))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
