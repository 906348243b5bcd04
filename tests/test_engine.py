import logging

import pytest

from app.schemas import SkipReason
from app.services import engine
from factories import make_course, make_faculty, make_room


# -----------------------------
# conflitos e capacidade
# -----------------------------
def test_no_time_slot_is_used_twice():
    courses = [make_course(f"c{i}", enrollment=10 + i) for i in range(12)]
    faculty = [make_faculty("f1"), make_faculty("f2")]
    rooms = [make_room("r1", 15), make_room("r2", 40)]

    result = engine.generate(courses, faculty, rooms)

    slots = [e.time_slot_id for e in result.entries]
    assert len(result.entries) == 12
    assert len(set(slots)) == len(slots)


def test_every_room_fits_its_course():
    courses = [make_course("c1", 50), make_course("c2", 5), make_course("c3", 25)]
    rooms = [make_room("small", 10), make_room("mid", 30), make_room("big", 60)]
    by_id = {r.id: r for r in rooms}

    result = engine.generate(courses, [make_faculty("f1")], rooms)

    for entry in result.entries:
        assert by_id[entry.room_id].capacity >= entry.course.enrollment


def test_same_input_gives_same_assignments():
    courses = [make_course("c1", code="CS101"), make_course("c2", code="MA201"), make_course("c3", 45)]
    faculty = [make_faculty("f1", department="Mathematics"), make_faculty("f2", department="Computer Science")]
    rooms = [make_room("r1", 30), make_room("r2", 50)]

    first = engine.generate(courses, faculty, rooms)
    second = engine.generate(courses, faculty, rooms)

    assert [e.assignment() for e in first.entries] == [e.assignment() for e in second.entries]
    assert {e.id for e in first.entries}.isdisjoint({e.id for e in second.entries})


def test_rooms_are_scanned_from_the_start_for_each_course():
    courses = [make_course("A", enrollment=30), make_course("B", enrollment=10)]
    rooms = [make_room("R1", capacity=10), make_room("R2", capacity=30)]

    result = engine.generate(courses, [make_faculty("f1")], rooms)

    rooms_by_course = {e.course_id: e.room_id for e in result.entries}
    assert rooms_by_course == {"A": "R2", "B": "R1"}


def test_slots_are_filled_day_by_day_in_order():
    courses = [make_course(f"c{i}") for i in range(10)]

    result = engine.generate(courses, [make_faculty("f1")], [make_room("r1")])

    assert [e.time_slot_id for e in result.entries] == list(range(1, 11))


# -----------------------------
# pulando cursos
# -----------------------------
def test_course_beyond_the_forty_slots_is_skipped(caplog):
    courses = [make_course(f"c{i}") for i in range(1, 42)]

    with caplog.at_level(logging.WARNING, logger="app.services.engine"):
        result = engine.generate(courses, [make_faculty("f1")], [make_room("r1")])

    assert len(result.entries) == 40
    assert sorted(e.time_slot_id for e in result.entries) == list(range(1, 41))
    assert [w.course_id for w in result.warnings] == ["c41"]
    assert result.warnings[0].reason is SkipReason.NO_SLOT
    assert "c41" in caplog.text


def test_course_without_a_big_enough_room_is_skipped_and_the_rest_continue():
    courses = [make_course("huge", enrollment=500), make_course("ok", enrollment=20)]

    result = engine.generate(courses, [make_faculty("f1")], [make_room("r1", 30)])

    assert [e.course_id for e in result.entries] == ["ok"]
    assert result.entries[0].time_slot_id == 1
    assert len(result.warnings) == 1
    assert result.warnings[0].course_id == "huge"
    assert result.warnings[0].reason is SkipReason.NO_ROOM


def test_nothing_placeable_returns_empty_without_raising():
    courses = [make_course("c1", enrollment=100), make_course("c2", enrollment=200)]

    result = engine.generate(courses, [make_faculty("f1")], [make_room("r1", 10)])

    assert result.entries == []
    assert result.missing_data is False
    assert len(result.warnings) == 2


# -----------------------------
# duration_hours
# -----------------------------
def test_multi_hour_course_still_reserves_a_single_slot():
    courses = [make_course("long", duration_hours=3), make_course("short")]

    result = engine.generate(courses, [make_faculty("f1")], [make_room("r1")])

    assert [e.time_slot_id for e in result.entries] == [1, 2]


def test_duration_shrinks_the_hours_scanned_per_day():
    # duração 8 só cabe na hora 1 de cada dia
    courses = [make_course(f"c{i}", duration_hours=8) for i in range(6)]

    result = engine.generate(courses, [make_faculty("f1")], [make_room("r1")])

    assert [e.time_slot_id for e in result.entries] == [1, 9, 17, 25, 33]
    assert [w.course_id for w in result.warnings] == ["c5"]


def test_course_longer_than_a_day_never_fits():
    result = engine.generate(
        [make_course("c1", duration_hours=9)], [make_faculty("f1")], [make_room("r1")]
    )

    assert result.entries == []
    assert result.warnings[0].reason is SkipReason.NO_SLOT


# -----------------------------
# escolha do professor
# -----------------------------
def test_cs_course_goes_to_computer_department_even_if_not_first():
    faculty = [
        make_faculty("math", department="Mathematics"),
        make_faculty("cs", department="Computer Science"),
    ]

    result = engine.generate([make_course("c1", code="CS101")], faculty, [make_room("r1")])

    assert result.entries[0].faculty_id == "cs"


@pytest.mark.parametrize("code, expected", [
    ("AI300", "ml"),
    ("MA201", "prob"),
    ("EE110", "iot"),
    ("ME220", "thermo"),
    ("cs500", "ml"),
])
def test_prefix_matches_specializations(code, expected):
    faculty = [
        make_faculty("none", department="History"),
        make_faculty("ml", specializations=["Deep Machine Learning"]),
        make_faculty("prob", specializations=["Probability Theory"]),
        make_faculty("iot", specializations=["IoT Systems"]),
        make_faculty("thermo", specializations=["Applied Thermodynamics"]),
    ]

    member = engine.select_faculty(make_course("c1", code=code), faculty)

    assert member.id == expected


@pytest.mark.parametrize("code, department", [
    ("MA101", "Applied MATHEMATICS"),
    ("EE101", "Electrical Engineering"),
    ("ME101", "Mechanical Engineering"),
])
def test_prefix_matches_department_case_insensitive(code, department):
    faculty = [make_faculty("other", department="Biology"), make_faculty("match", department=department)]

    assert engine.select_faculty(make_course("c1", code=code), faculty).id == "match"


def test_unknown_prefix_falls_back_to_first_faculty():
    faculty = [make_faculty("first", department="Biology"), make_faculty("cs", department="Computer Science")]

    assert engine.select_faculty(make_course("c1", code="PH101"), faculty).id == "first"


def test_rule_without_any_match_falls_back_to_first_faculty():
    faculty = [make_faculty("first", department="Biology"), make_faculty("second", department="History")]

    assert engine.select_faculty(make_course("c1", code="CS101"), faculty).id == "first"


# -----------------------------
# entrada vazia
# -----------------------------
@pytest.mark.parametrize("missing", ["courses", "faculty", "rooms"])
def test_empty_input_short_circuits(missing, monkeypatch):
    def must_not_run(*args, **kwargs):
        raise AssertionError("should not be called")

    monkeypatch.setattr(engine, "select_room", must_not_run)
    monkeypatch.setattr(engine, "find_slot", must_not_run)

    data = {
        "courses": [make_course("c1")],
        "faculty": [make_faculty("f1")],
        "rooms": [make_room("r1")],
    }
    data[missing] = []

    result = engine.generate(data["courses"], data["faculty"], data["rooms"])

    assert result.entries == []
    assert result.missing_data is True


def test_inputs_are_not_modified():
    courses = [make_course("c1"), make_course("c2", enrollment=90)]
    faculty = [make_faculty("f1", specializations=["Algebra"])]
    rooms = [make_room("r1")]
    before = [m.model_dump() for m in courses + faculty + rooms]

    engine.generate(courses, faculty, rooms)

    assert [m.model_dump() for m in courses + faculty + rooms] == before
    assert len(courses) == 2


# -----------------------------
# is_occupied
# -----------------------------
def test_used_slot_blocks_other_rooms_and_faculty():
    taken = engine.generate([make_course("c1")], [make_faculty("f1")], [make_room("r1")]).entries

    assert engine.is_occupied(taken, 1, "another-room", "another-faculty") is True
    assert engine.is_occupied(taken, 2, "r1", "f1") is False
