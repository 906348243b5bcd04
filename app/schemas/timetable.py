from enum import Enum

from pydantic import BaseModel, Field

from app.core.timeslots import TOTAL_SLOTS
from app.schemas.course import CourseOut
from app.schemas.faculty import FacultyOut
from app.schemas.room import RoomOut


class TimeSlotOut(BaseModel):
    id: int
    day: str
    day_index: int
    slot: int
    start_time: str
    end_time: str


class TimetableEntryIn(BaseModel):
    id: str | None = None
    course_id: str = Field(..., min_length=1)
    faculty_id: str = Field(..., min_length=1)
    room_id: str = Field(..., min_length=1)
    time_slot_id: int = Field(..., ge=1, le=TOTAL_SLOTS)


class TimetableEntryOut(BaseModel):
    id: str
    course_id: str
    faculty_id: str
    room_id: str
    time_slot_id: int

    # cópias pra exibição (podem faltar em entradas salvas manualmente)
    course: CourseOut | None = None
    faculty: FacultyOut | None = None
    room: RoomOut | None = None

    class Config:
        from_attributes = True

    def assignment(self) -> tuple[str, str, str, int]:
        return self.course_id, self.faculty_id, self.room_id, self.time_slot_id


class SkipReason(str, Enum):
    NO_ROOM = "no_room"
    NO_SLOT = "no_slot"


class PlacementWarning(BaseModel):
    course_id: str
    course_name: str
    reason: SkipReason
    message: str


class GenerationResult(BaseModel):
    entries: list[TimetableEntryOut] = Field(default_factory=list)
    warnings: list[PlacementWarning] = Field(default_factory=list)
    missing_data: bool = False


class OperationStatus(str, Enum):
    OK = "ok"
    MISSING_DATA = "missing_data"
    NOTHING_ASSIGNABLE = "nothing_assignable"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"
    CLEAR_FAILED = "clear_failed"
    IN_PROGRESS = "in_progress"


class Notification(BaseModel):
    level: str  # success, info, warning, error
    code: str
    message: str


class TimetableSnapshot(BaseModel):
    status: OperationStatus = OperationStatus.OK
    courses: list[CourseOut] = Field(default_factory=list)
    faculty: list[FacultyOut] = Field(default_factory=list)
    rooms: list[RoomOut] = Field(default_factory=list)
    entries: list[TimetableEntryOut] = Field(default_factory=list)
    has_data: bool = False
    notifications: list[Notification] = Field(default_factory=list)


class OperationResult(BaseModel):
    status: OperationStatus
    entries: list[TimetableEntryOut] = Field(default_factory=list)
    warnings: list[PlacementWarning] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)


class CoordinatorStatus(BaseModel):
    state: str
    is_generating: bool
    is_clearing: bool
    is_saving: bool
