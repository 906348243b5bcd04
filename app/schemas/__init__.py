from app.schemas.course import CourseIn, CourseOut
from app.schemas.faculty import FacultyIn, FacultyOut
from app.schemas.room import RoomIn, RoomOut
from app.schemas.timetable import (
    CoordinatorStatus,
    GenerationResult,
    Notification,
    OperationResult,
    OperationStatus,
    PlacementWarning,
    SkipReason,
    TimeSlotOut,
    TimetableEntryIn,
    TimetableEntryOut,
    TimetableSnapshot,
)
