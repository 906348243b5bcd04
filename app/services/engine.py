"""
Gerador de horário: guloso, primeiro-que-serve, sem backtracking.

Para cada curso, na ordem em que veio:
  1) sala: a primeira com capacity >= enrollment (senão o curso é pulado)
  2) professor: o primeiro que bate com a regra do prefixo do code
     (cs/ai, ma, ee, me); sem regra ou sem ninguém, o primeiro da lista
  3) slot: varre dia 1..5 e hora 1..(8 - (duration_hours - 1)) e pega o
     primeiro slot que ninguém usou ainda nesta rodada (senão pula o curso)

Limitações conhecidas, mantidas de propósito:
  - duration_hours só encurta a varredura. Cada curso ocupa 1 slot só.
  - um slot usado por qualquer curso fica bloqueado pra todos, mesmo que a
    sala e o professor estejam livres.

Função pura: não mexe nas listas de entrada e não guarda estado.
"""
import logging
import uuid
from typing import Sequence

from app.core.timeslots import DAYS, SLOTS_PER_DAY, slot_id
from app.schemas.course import CourseOut
from app.schemas.faculty import FacultyOut
from app.schemas.room import RoomOut
from app.schemas.timetable import (
    GenerationResult,
    PlacementWarning,
    SkipReason,
    TimetableEntryOut,
)

logger = logging.getLogger(__name__)

# prefixo (2 letras, minúsculo) -> (palavras no department, palavras nas specializations)
_COMPUTING = (("computer",), ("artificial", "machine"))

DEPARTMENT_RULES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "cs": _COMPUTING,
    "ai": _COMPUTING,
    "ma": (("math",), ("algebra", "probability")),
    "ee": (("electrical",), ("embedded", "iot")),
    "me": (("mechanical",), ("thermodynamics",)),
}


def course_prefix(course: CourseOut) -> str:
    return (course.code or "")[:2].lower()


def select_room(course: CourseOut, rooms: Sequence[RoomOut]) -> RoomOut | None:
    for room in rooms:
        if room.capacity >= course.enrollment:
            return room
    return None


def matches_rule(member: FacultyOut, departments: tuple[str, ...], specializations: tuple[str, ...]) -> bool:
    department = (member.department or "").lower()
    if any(word in department for word in departments):
        return True

    for tag in member.specializations or []:
        tag = tag.lower()
        if any(word in tag for word in specializations):
            return True
    return False


def select_faculty(course: CourseOut, faculty: Sequence[FacultyOut]) -> FacultyOut | None:
    if not faculty:
        return None

    rule = DEPARTMENT_RULES.get(course_prefix(course))
    if rule is not None:
        departments, specializations = rule
        for member in faculty:
            if matches_rule(member, departments, specializations):
                return member

    # melhor esforço: ninguém bateu, vai o primeiro da lista
    return faculty[0]


def is_occupied(
    entries: Sequence[TimetableEntryOut],
    time_slot_id: int,
    room_id: str,
    faculty_id: str,
) -> bool:
    in_slot = [e for e in entries if e.time_slot_id == time_slot_id]

    room_clash = any(e.room_id == room_id for e in in_slot)
    faculty_clash = any(e.faculty_id == faculty_id for e in in_slot)

    # sala e professor são subconjuntos: qualquer uso do slot já bloqueia
    return bool(in_slot) or room_clash or faculty_clash


def candidate_slots(duration_hours: int):
    last_hour = SLOTS_PER_DAY - (duration_hours - 1)
    for day in range(1, len(DAYS) + 1):
        for hour in range(1, last_hour + 1):
            yield slot_id(day, hour)


def find_slot(
    entries: Sequence[TimetableEntryOut],
    course: CourseOut,
    room: RoomOut,
    member: FacultyOut,
) -> int | None:
    for candidate in candidate_slots(course.duration_hours):
        if not is_occupied(entries, candidate, room.id, member.id):
            return candidate
    return None


def _skip(course: CourseOut, reason: SkipReason, message: str) -> PlacementWarning:
    logger.warning("course skipped id=%s name=%r: %s", course.id, course.name, message)
    return PlacementWarning(course_id=course.id, course_name=course.name, reason=reason, message=message)


def generate(
    courses: Sequence[CourseOut],
    faculty: Sequence[FacultyOut],
    rooms: Sequence[RoomOut],
) -> GenerationResult:
    if not courses or not faculty or not rooms:
        logger.warning(
            "missing data for generation: courses=%d faculty=%d rooms=%d",
            len(courses), len(faculty), len(rooms),
        )
        return GenerationResult(missing_data=True)

    entries: list[TimetableEntryOut] = []
    warnings: list[PlacementWarning] = []

    for course in courses:
        room = select_room(course, rooms)
        if room is None:
            warnings.append(_skip(
                course, SkipReason.NO_ROOM,
                f"No room with capacity for {course.enrollment} students",
            ))
            continue

        member = select_faculty(course, faculty)

        time_slot_id = find_slot(entries, course, room, member)
        if time_slot_id is None:
            warnings.append(_skip(course, SkipReason.NO_SLOT, "No free time slot left"))
            continue

        entries.append(
            TimetableEntryOut(
                id=str(uuid.uuid4()),
                course_id=course.id,
                faculty_id=member.id,
                room_id=room.id,
                time_slot_id=time_slot_id,
                course=course,
                faculty=member,
                room=room,
            )
        )

    logger.info(
        "timetable generated: %d placed, %d skipped of %d courses",
        len(entries), len(warnings), len(courses),
    )
    return GenerationResult(entries=entries, warnings=warnings)
