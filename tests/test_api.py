def add_course(client, code="CS101", enrollment=30, **extra):
    resp = client.post("/courses", json={"name": f"Course {code}", "code": code, "enrollment": enrollment, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


def add_faculty(client, name="Ada", department=None, specializations=None):
    payload = {"name": name, "email": f"{name.lower()}@university.edu", "department": department}
    if specializations is not None:
        payload["specializations"] = specializations
    resp = client.post("/faculty", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def add_room(client, name="Room 101", capacity=40, **extra):
    resp = client.post("/rooms", json={"name": name, "capacity": capacity, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


def seed(client):
    return {
        "courses": [add_course(client, "CS101", 30), add_course(client, "MA201", 25), add_course(client, "HI100", 10)],
        "faculty": [add_faculty(client, "Euler", "Mathematics"), add_faculty(client, "Turing", "Computer Science")],
        "rooms": [add_room(client, "Room 101", 20), add_room(client, "Room 202", 35)],
    }


# -----------------------------
# cadastro
# -----------------------------
def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_and_list_courses_in_order(client):
    first = add_course(client, "CS101", description="Intro")
    second = add_course(client, "MA201", duration_hours=2)

    listed = client.get("/courses").json()

    assert [c["id"] for c in listed] == [first["id"], second["id"]]
    assert listed[0]["description"] == "Intro"
    assert listed[1]["duration_hours"] == 2
    assert listed[0]["duration_hours"] == 1


def test_course_validation(client):
    resp = client.post("/courses", json={"name": "X", "code": "X1", "enrollment": 0})
    assert resp.status_code == 422

    resp = client.post("/courses", json={"name": "X", "code": "X1", "enrollment": 5, "duration_hours": 0})
    assert resp.status_code == 422


def test_faculty_specializations_from_comma_text(client):
    member = add_faculty(client, "Ada", specializations="Machine Learning, , Algebra ")

    assert member["specializations"] == ["Machine Learning", "Algebra"]
    assert member["department"] is None


def test_faculty_requires_valid_email(client):
    resp = client.post("/faculty", json={"name": "Ada", "email": "not-an-email"})
    assert resp.status_code == 422


def test_room_defaults(client):
    room = add_room(client)

    assert room["floor"] == 1
    assert room["has_projector"] is False
    assert room["has_computers"] is False
    assert room["building"] is None


def test_get_and_delete_unknown_records(client):
    for resource in ("courses", "faculty", "rooms"):
        assert client.get(f"/{resource}/missing").status_code == 404
        assert client.delete(f"/{resource}/missing").status_code == 404


def test_delete_room(client):
    room = add_room(client)

    assert client.delete(f"/rooms/{room['id']}").status_code == 204
    assert client.get(f"/rooms/{room['id']}").status_code == 404
    assert client.get("/rooms").json() == []


# -----------------------------
# horário
# -----------------------------
def test_load_reports_has_data(client):
    assert client.get("/timetable").json()["has_data"] is False

    seed(client)
    body = client.get("/timetable").json()

    assert body["has_data"] is True
    assert body["entries"] == []
    assert len(body["courses"]) == 3


def test_generate_saves_and_load_shows_entries(client):
    data = seed(client)

    resp = client.post("/timetable/generate")
    assert resp.status_code == 200
    body = resp.json()

    assert body["status"] == "ok"
    assert [e["time_slot_id"] for e in body["entries"]] == [1, 2, 3]

    by_course = {e["course_id"]: e for e in body["entries"]}
    cs = by_course[data["courses"][0]["id"]]
    assert cs["faculty_id"] == data["faculty"][1]["id"]
    assert cs["room_id"] == data["rooms"][1]["id"]
    hi = by_course[data["courses"][2]["id"]]
    assert hi["room_id"] == data["rooms"][0]["id"]

    stored = client.get("/timetable").json()["entries"]
    assert [e["id"] for e in stored] == [e["id"] for e in body["entries"]]
    assert stored[0]["course"]["code"] == "CS101"
    assert stored[0]["room"]["floor"] == 1


def test_generate_again_replaces_entries(client):
    seed(client)
    first = client.post("/timetable/generate").json()
    second = client.post("/timetable/generate").json()

    stored = client.get("/timetable").json()["entries"]

    assert {e["id"] for e in stored} == {e["id"] for e in second["entries"]}
    assert not {e["id"] for e in stored} & {e["id"] for e in first["entries"]}


def test_generate_without_data(client):
    add_course(client)

    body = client.post("/timetable/generate").json()

    assert body["status"] == "missing_data"
    assert body["entries"] == []


def test_clear_twice(client):
    seed(client)
    client.post("/timetable/generate")

    for _ in range(2):
        resp = client.delete("/timetable")
        assert resp.status_code == 200
        assert resp.json()["entries"] == []
        assert resp.json()["status"] == "ok"

    assert client.get("/timetable").json()["entries"] == []


def test_save_entries(client):
    data = seed(client)
    course, member, room = data["courses"][0], data["faculty"][0], data["rooms"][1]
    payload = [{"course_id": course["id"], "faculty_id": member["id"], "room_id": room["id"], "time_slot_id": 12}]

    body = client.put("/timetable", json=payload).json()

    assert body["status"] == "ok"
    stored = client.get("/timetable").json()["entries"]
    assert [e["time_slot_id"] for e in stored] == [12]
    assert stored[0]["faculty"]["name"] == member["name"]


def test_save_rejects_repeated_slot(client):
    data = seed(client)
    course, member, room = data["courses"][0], data["faculty"][0], data["rooms"][0]
    item = {"course_id": course["id"], "faculty_id": member["id"], "room_id": room["id"], "time_slot_id": 4}

    body = client.put("/timetable", json=[item, item]).json()

    assert body["status"] == "save_failed"
    assert client.get("/timetable").json()["entries"] == []


def test_save_rejects_unknown_slot(client):
    item = {"course_id": "c", "faculty_id": "f", "room_id": "r", "time_slot_id": 41}

    assert client.put("/timetable", json=[item]).status_code == 422


def test_deleting_a_course_drops_its_entries(client):
    data = seed(client)
    client.post("/timetable/generate")

    client.delete(f"/courses/{data['courses'][0]['id']}")

    stored = client.get("/timetable").json()["entries"]
    assert len(stored) == 2
    assert data["courses"][0]["id"] not in {e["course_id"] for e in stored}


def test_busy_coordinator_answers_409(client):
    coordinator = client.app.state.coordinator
    coordinator._lock.acquire()
    try:
        assert client.post("/timetable/generate").status_code == 409
        assert client.delete("/timetable").status_code == 409
    finally:
        coordinator._lock.release()

    assert client.delete("/timetable").status_code == 200


def test_status_and_timeslots(client):
    status = client.get("/timetable/status").json()
    assert status["is_generating"] is False
    assert status["is_clearing"] is False

    slots = client.get("/timetable/timeslots").json()
    assert len(slots) == 40
    assert slots[0] == {
        "id": 1, "day": "Monday", "day_index": 1, "slot": 1, "start_time": "09:00", "end_time": "10:00",
    }


def test_save_rejects_entries_pointing_to_missing_records(client):
    item = {"course_id": "ghost", "faculty_id": "ghost", "room_id": "ghost", "time_slot_id": 1}

    body = client.put("/timetable", json=[item]).json()

    assert body["status"] == "save_failed"
    assert client.get("/timetable").json()["entries"] == []


def test_deleting_a_room_cascades_to_its_entries(client):
    data = seed(client)
    client.post("/timetable/generate")
    small_room = data["rooms"][0]["id"]

    assert client.delete(f"/rooms/{small_room}").status_code == 204

    stored = client.get("/timetable").json()["entries"]
    assert len(stored) == 2
    assert small_room not in {e["room_id"] for e in stored}
