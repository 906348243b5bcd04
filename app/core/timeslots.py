"""
Grade semanal fixa: 5 dias x 8 slots de 1 hora.

O id do slot é `(day - 1) * 8 + slot`, com day 1 = segunda-feira
(segunda = 1..8, sexta = 33..40). É dado de referência, nunca vai pro banco.
"""
from typing import NamedTuple

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
SLOTS_PER_DAY = 8
TOTAL_SLOTS = len(DAYS) * SLOTS_PER_DAY

# entre o slot 4 e o 5 tem o almoço (13h-14h)
SLOT_TIMES = (
    ("09:00", "10:00"),
    ("10:00", "11:00"),
    ("11:00", "12:00"),
    ("12:00", "13:00"),
    ("14:00", "15:00"),
    ("15:00", "16:00"),
    ("16:00", "17:00"),
    ("17:00", "18:00"),
)


class TimeSlot(NamedTuple):
    id: int
    day: str
    day_index: int
    slot: int
    start_time: str
    end_time: str


def slot_id(day: int, slot: int) -> int:
    if not 1 <= day <= len(DAYS):
        raise ValueError(f"day out of range: {day}")
    if not 1 <= slot <= SLOTS_PER_DAY:
        raise ValueError(f"slot out of range: {slot}")
    return (day - 1) * SLOTS_PER_DAY + slot


def slot_position(time_slot_id: int) -> tuple[int, int]:
    """Inverso de slot_id: devolve (day, slot), ambos começando em 1."""
    if not 1 <= time_slot_id <= TOTAL_SLOTS:
        raise ValueError(f"time slot id out of range: {time_slot_id}")
    day, slot = divmod(time_slot_id - 1, SLOTS_PER_DAY)
    return day + 1, slot + 1


def _build_grid() -> tuple[TimeSlot, ...]:
    grid = []
    for day_index, day_name in enumerate(DAYS, start=1):
        for slot, (start, end) in enumerate(SLOT_TIMES, start=1):
            grid.append(TimeSlot(slot_id(day_index, slot), day_name, day_index, slot, start, end))
    return tuple(grid)


TIME_SLOTS = _build_grid()


def get_time_slot(time_slot_id: int) -> TimeSlot:
    slot_position(time_slot_id)
    return TIME_SLOTS[time_slot_id - 1]
