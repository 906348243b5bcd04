from app.models.course import Course
from app.models.faculty import Faculty
from app.models.room import Room
from app.models.timetable_entry import TimetableEntry

__all__ = ["Course", "Faculty", "Room", "TimetableEntry"]
