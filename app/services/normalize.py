"""
Conversão linha do banco -> schema.

Todos os defaults de campo opcional ficam aqui, num lugar só, em vez de
espalhados em `x or default` pelas rotas.
"""
from app.models.course import Course
from app.models.faculty import Faculty
from app.models.room import Room
from app.models.timetable_entry import TimetableEntry
from app.schemas.course import CourseOut
from app.schemas.faculty import FacultyOut
from app.schemas.room import RoomOut
from app.schemas.timetable import TimetableEntryOut

DEFAULT_DURATION_HOURS = 1
DEFAULT_FLOOR = 1
DEFAULT_HAS_PROJECTOR = False
DEFAULT_HAS_COMPUTERS = False


def normalize_course(row: Course) -> CourseOut:
    return CourseOut(
        id=row.id,
        name=row.name,
        code=row.code,
        enrollment=row.enrollment,
        duration_hours=row.duration_hours or DEFAULT_DURATION_HOURS,
        description=row.description or None,
    )


def normalize_faculty(row: Faculty) -> FacultyOut:
    return FacultyOut(
        id=row.id,
        name=row.name,
        email=row.email,
        department=row.department or None,
        specializations=list(row.specializations or []),
    )


def normalize_room(row: Room) -> RoomOut:
    return RoomOut(
        id=row.id,
        name=row.name,
        capacity=row.capacity,
        building=row.building or None,
        floor=row.floor if row.floor is not None else DEFAULT_FLOOR,
        has_projector=DEFAULT_HAS_PROJECTOR if row.has_projector is None else row.has_projector,
        has_computers=DEFAULT_HAS_COMPUTERS if row.has_computers is None else row.has_computers,
    )


def normalize_entry(row: TimetableEntry) -> TimetableEntryOut:
    return TimetableEntryOut(
        id=row.id,
        course_id=row.course_id,
        faculty_id=row.faculty_id,
        room_id=row.room_id,
        time_slot_id=row.time_slot_id,
        course=normalize_course(row.course) if row.course is not None else None,
        faculty=normalize_faculty(row.faculty) if row.faculty is not None else None,
        room=normalize_room(row.room) if row.room is not None else None,
    )
