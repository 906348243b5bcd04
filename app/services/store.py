from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.models.course import Course
from app.models.faculty import Faculty
from app.models.room import Room
from app.models.timetable_entry import TimetableEntry
from app.schemas.course import CourseOut
from app.schemas.faculty import FacultyOut
from app.schemas.room import RoomOut
from app.schemas.timetable import TimetableEntryOut
from app.services.normalize import (
    normalize_course,
    normalize_entry,
    normalize_faculty,
    normalize_room,
)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Falha de leitura/escrita no armazenamento (timeout incluso)."""


class DataStore(Protocol):
    # True quando replace_entries apaga+insere numa transação só
    atomic_replace: bool

    def list_courses(self) -> list[CourseOut]: ...

    def list_faculty(self) -> list[FacultyOut]: ...

    def list_rooms(self) -> list[RoomOut]: ...

    def list_entries(self) -> list[TimetableEntryOut]: ...

    def replace_entries(self, entries: Sequence[TimetableEntryOut]) -> None: ...

    def insert_entries(self, entries: Sequence[TimetableEntryOut]) -> None: ...

    def delete_all_entries(self) -> None: ...


class SqlAlchemyStore:
    atomic_replace = True

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            raise StoreError(str(exc)) from exc
        finally:
            db.close()

    # ----------------------------
    # Leitura
    # ----------------------------
    def list_courses(self) -> list[CourseOut]:
        with self._session() as db:
            rows = db.execute(select(Course).order_by(Course.position)).scalars().all()
            return [normalize_course(r) for r in rows]

    def list_faculty(self) -> list[FacultyOut]:
        with self._session() as db:
            rows = db.execute(select(Faculty).order_by(Faculty.position)).scalars().all()
            return [normalize_faculty(r) for r in rows]

    def list_rooms(self) -> list[RoomOut]:
        with self._session() as db:
            rows = db.execute(select(Room).order_by(Room.position)).scalars().all()
            return [normalize_room(r) for r in rows]

    def list_entries(self) -> list[TimetableEntryOut]:
        q = (
            select(TimetableEntry)
            .options(
                selectinload(TimetableEntry.course),
                selectinload(TimetableEntry.faculty),
                selectinload(TimetableEntry.room),
            )
            .order_by(TimetableEntry.time_slot_id)
        )
        with self._session() as db:
            rows = db.execute(q).scalars().all()
            return [normalize_entry(r) for r in rows]

    # ----------------------------
    # Escrita
    # ----------------------------
    def replace_entries(self, entries: Sequence[TimetableEntryOut]) -> None:
        # delete + insert na mesma transação: quem lê vê o horário antigo ou o novo, nunca os dois
        with self._session() as db:
            db.execute(delete(TimetableEntry))
            db.add_all([_to_row(e) for e in entries])
            db.commit()
        logger.info("timetable entries replaced: %d", len(entries))

    def insert_entries(self, entries: Sequence[TimetableEntryOut]) -> None:
        with self._session() as db:
            db.add_all([_to_row(e) for e in entries])
            db.commit()

    def delete_all_entries(self) -> None:
        with self._session() as db:
            result = db.execute(delete(TimetableEntry))
            db.commit()
        logger.info("timetable entries deleted: %s", result.rowcount)


def _to_row(entry: TimetableEntryOut) -> TimetableEntry:
    return TimetableEntry(
        id=entry.id,
        course_id=entry.course_id,
        faculty_id=entry.faculty_id,
        room_id=entry.room_id,
        time_slot_id=entry.time_slot_id,
    )
