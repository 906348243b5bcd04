from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_coordinator
from app.core.timeslots import TIME_SLOTS
from app.schemas.timetable import (
    CoordinatorStatus,
    OperationResult,
    OperationStatus,
    TimeSlotOut,
    TimetableEntryIn,
    TimetableEntryOut,
    TimetableSnapshot,
)
from app.services.coordinator import TimetableCoordinator

router = APIRouter(prefix="/timetable", tags=["timetable"])


# ----------------------------
# Helpers
# ----------------------------
def _reject_if_busy(result: OperationResult) -> OperationResult:
    if result.status is OperationStatus.IN_PROGRESS:
        raise HTTPException(status_code=409, detail="operation in progress")
    return result


# ----------------------------
# LOAD
# ----------------------------
@router.get("", response_model=TimetableSnapshot)
def load_timetable(coordinator: TimetableCoordinator = Depends(get_coordinator)):
    return coordinator.load()


# ----------------------------
# GENERATE (apaga o horário antigo e grava o novo)
# ----------------------------
@router.post("/generate", response_model=OperationResult)
def generate_timetable(coordinator: TimetableCoordinator = Depends(get_coordinator)):
    return _reject_if_busy(coordinator.generate())


# ----------------------------
# SAVE (sem gerar de novo)
# ----------------------------
@router.put("", response_model=OperationResult)
def save_timetable(
    payload: List[TimetableEntryIn],
    coordinator: TimetableCoordinator = Depends(get_coordinator),
):
    entries = [
        TimetableEntryOut(
            id=item.id or str(uuid.uuid4()),
            course_id=item.course_id,
            faculty_id=item.faculty_id,
            room_id=item.room_id,
            time_slot_id=item.time_slot_id,
        )
        for item in payload
    ]
    return _reject_if_busy(coordinator.save(entries))


# ----------------------------
# CLEAR
# ----------------------------
@router.delete("", response_model=OperationResult)
def clear_timetable(coordinator: TimetableCoordinator = Depends(get_coordinator)):
    return _reject_if_busy(coordinator.clear())


@router.get("/status", response_model=CoordinatorStatus)
def timetable_status(coordinator: TimetableCoordinator = Depends(get_coordinator)):
    return coordinator.status()


@router.get("/timeslots", response_model=list[TimeSlotOut])
def list_timeslots():
    return [TimeSlotOut(**ts._asdict()) for ts in TIME_SLOTS]
