"""
Coordenador do horário: carrega dados do store, chama o gerador e grava.

Nenhuma operação daqui levanta exceção pra quem chama. Falha de store,
falta de dados e operação concorrente viram `OperationStatus` + notificações.

Só uma operação de escrita (generate/clear/save) roda por vez. Uma segunda
chamada enquanto a primeira está em andamento volta na hora com
`in_progress`, sem entrar em fila.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Sequence

from app.core.timeslots import TOTAL_SLOTS
from app.schemas.timetable import (
    CoordinatorStatus,
    Notification,
    OperationResult,
    OperationStatus,
    TimetableEntryOut,
    TimetableSnapshot,
)
from app.services import engine
from app.services.store import DataStore, StoreError

logger = logging.getLogger(__name__)


class CoordinatorState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    GENERATING = "generating"
    CLEARING = "clearing"
    SAVING = "saving"


class OperationInProgress(Exception):
    def __init__(self, state: CoordinatorState):
        super().__init__(f"operation in progress: {state.value}")
        self.state = state


def _note(level: str, code: str, message: str) -> Notification:
    return Notification(level=level, code=code, message=message)


class TimetableCoordinator:
    def __init__(self, store: DataStore):
        self._store = store
        self._lock = threading.Lock()
        self._state = CoordinatorState.UNINITIALIZED
        self._loaded = False

    # ----------------------------
    # Status
    # ----------------------------
    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def is_generating(self) -> bool:
        return self._state is CoordinatorState.GENERATING

    @property
    def is_clearing(self) -> bool:
        return self._state is CoordinatorState.CLEARING

    @property
    def is_saving(self) -> bool:
        return self._state is CoordinatorState.SAVING

    def status(self) -> CoordinatorStatus:
        return CoordinatorStatus(
            state=self._state.value,
            is_generating=self.is_generating,
            is_clearing=self.is_clearing,
            is_saving=self.is_saving,
        )

    @contextmanager
    def _exclusive(self, state: CoordinatorState) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            logger.warning("rejected %s: %s already running", state.value, self._state.value)
            raise OperationInProgress(self._state)
        previous = self._state
        self._state = state
        try:
            yield
        finally:
            # só vira LOADED se algum load deu certo
            self._state = CoordinatorState.LOADED if self._loaded else previous
            self._lock.release()

    @staticmethod
    def _in_progress(exc: OperationInProgress) -> OperationResult:
        return OperationResult(
            status=OperationStatus.IN_PROGRESS,
            notifications=[_note("warning", "operation_in_progress", f"Another operation is in progress ({exc.state.value})")],
        )

    # ----------------------------
    # Operações
    # ----------------------------
    def load(self) -> TimetableSnapshot:
        try:
            courses = self._store.list_courses()
            faculty = self._store.list_faculty()
            rooms = self._store.list_rooms()
            entries = self._store.list_entries()
        except StoreError as exc:
            logger.error("load failed: %s", exc)
            return TimetableSnapshot(
                status=OperationStatus.LOAD_FAILED,
                notifications=[_note("error", "load_failed", "Failed to load timetable data")],
            )

        self._loaded = True
        if self._state is CoordinatorState.UNINITIALIZED:
            self._state = CoordinatorState.LOADED

        return TimetableSnapshot(
            courses=courses,
            faculty=faculty,
            rooms=rooms,
            entries=entries,
            has_data=bool(courses) and bool(faculty) and bool(rooms),
        )

    def generate(self) -> OperationResult:
        try:
            with self._exclusive(CoordinatorState.GENERATING):
                return self._generate()
        except OperationInProgress as exc:
            return self._in_progress(exc)

    def _generate(self) -> OperationResult:
        snapshot = self.load()
        if snapshot.status is OperationStatus.LOAD_FAILED:
            return OperationResult(status=snapshot.status, notifications=snapshot.notifications)

        result = engine.generate(snapshot.courses, snapshot.faculty, snapshot.rooms)
        notifications = [
            _note("warning", "course_skipped", f"{w.course_name}: {w.message}") for w in result.warnings
        ]

        if result.missing_data:
            notifications.append(_note(
                "warning", "missing_data",
                "Add courses, faculty and rooms before generating a timetable",
            ))
            return OperationResult(status=OperationStatus.MISSING_DATA, notifications=notifications)

        if not result.entries:
            notifications.append(_note("warning", "nothing_assignable", "No course could be placed"))
            return OperationResult(
                status=OperationStatus.NOTHING_ASSIGNABLE,
                warnings=result.warnings,
                notifications=notifications,
            )

        save_failure = self._persist(result.entries)
        if save_failure is not None:
            # devolve o que foi gerado mesmo assim, pra tela poder mostrar
            return OperationResult(
                status=OperationStatus.SAVE_FAILED,
                entries=result.entries,
                warnings=result.warnings,
                notifications=notifications + [save_failure],
            )

        logger.info("timetable generated and saved: %d entries", len(result.entries))
        notifications.append(_note("success", "generated", "Timetable successfully generated!"))
        return OperationResult(
            status=OperationStatus.OK,
            entries=result.entries,
            warnings=result.warnings,
            notifications=notifications,
        )

    def clear(self) -> OperationResult:
        try:
            with self._exclusive(CoordinatorState.CLEARING):
                try:
                    self._store.delete_all_entries()
                except StoreError as exc:
                    logger.error("clear failed: %s", exc)
                    return OperationResult(
                        status=OperationStatus.CLEAR_FAILED,
                        notifications=[_note("error", "clear_failed", "Failed to clear timetable")],
                    )
        except OperationInProgress as exc:
            return self._in_progress(exc)

        return OperationResult(
            status=OperationStatus.OK,
            notifications=[_note("success", "cleared", "Timetable cleared")],
        )

    def save(self, entries: Sequence[TimetableEntryOut]) -> OperationResult:
        entries = list(entries)
        if not entries:
            return OperationResult(
                status=OperationStatus.OK,
                notifications=[_note("info", "nothing_to_save", "Empty timetable, nothing saved")],
            )

        unknown = sorted({e.time_slot_id for e in entries if not 1 <= e.time_slot_id <= TOTAL_SLOTS})
        if unknown:
            return OperationResult(
                status=OperationStatus.SAVE_FAILED,
                entries=entries,
                notifications=[_note("error", "save_failed", f"Unknown time slot(s): {unknown}")],
            )

        slots = [e.time_slot_id for e in entries]
        if len(set(slots)) != len(slots):
            return OperationResult(
                status=OperationStatus.SAVE_FAILED,
                entries=entries,
                notifications=[_note("error", "save_failed", "Two entries share the same time slot")],
            )

        try:
            with self._exclusive(CoordinatorState.SAVING):
                save_failure = self._persist(entries)
        except OperationInProgress as exc:
            return self._in_progress(exc)

        if save_failure is not None:
            return OperationResult(status=OperationStatus.SAVE_FAILED, entries=entries, notifications=[save_failure])

        return OperationResult(
            status=OperationStatus.OK,
            entries=entries,
            notifications=[_note("success", "saved", "Timetable saved")],
        )

    # ----------------------------
    # Gravação (apaga tudo e insere tudo)
    # ----------------------------
    def _persist(self, entries: Sequence[TimetableEntryOut]) -> Notification | None:
        try:
            if self._store.atomic_replace:
                self._store.replace_entries(entries)
            else:
                self._store.delete_all_entries()
                try:
                    self._store.insert_entries(entries)
                except StoreError:
                    self._discard_partial_insert()
                    raise
        except StoreError as exc:
            logger.error("save failed: %s", exc)
            return _note("error", "save_failed", "Failed to save timetable")
        return None

    def _discard_partial_insert(self) -> None:
        # melhor ficar vazio do que com metade do horário novo
        try:
            self._store.delete_all_entries()
        except StoreError as exc:
            logger.error("could not discard partially saved entries: %s", exc)
