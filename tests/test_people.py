import json
from datetime import date

import pytest

from schooladmin.exceptions import ConflictError, ReferentialError, ValidationError
from schooladmin.models import Student
from schooladmin.repositories import ClassRepository, StudentRepository, TeacherRepository


@pytest.mark.parametrize("path,payload_fixture", [
    ("/api/teachers", "teacher_payload"),
    ("/api/students", "student_payload"),
])
def test_create_then_list_exactly_once(client, admin_headers, request, path, payload_fixture):
    payload = request.getfixturevalue(payload_fixture)

    created = client.post(path, json=payload, headers=admin_headers)

    assert created.status_code == 201
    listed = client.get(path, headers=admin_headers).json()
    assert [item["id"] for item in listed].count(created.json()["id"]) == 1
    assert listed[0]["contactDetails"] == payload["contactDetails"]


@pytest.mark.parametrize("path", ["/api/teachers", "/api/students"])
def test_people_read_roles(client, teacher_headers, student_headers, path):
    assert client.get(path, headers=teacher_headers).status_code == 200
    assert client.get(path, headers=student_headers).status_code == 403
    assert client.get(path).status_code == 401


def test_teacher_cannot_add_student(client, teacher_headers, student_payload):
    response = client.post("/api/students", json=student_payload, headers=teacher_headers)

    assert response.status_code == 403


def test_student_with_unknown_class_is_not_persisted(client, admin_headers, db_session, student_payload):
    response = client.post("/api/students", json={**student_payload, "class": "no-such-class"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["code"] == "REFERENCE_NOT_FOUND"
    assert db_session.query(Student).count() == 0


def test_negative_amounts_rejected(client, admin_headers, teacher_payload, student_payload):
    assert client.post("/api/teachers", json={**teacher_payload, "salary": -5}, headers=admin_headers).status_code == 400
    assert client.post("/api/students", json={**student_payload, "feesPaid": -1}, headers=admin_headers).status_code == 400


def test_update_and_clear_reference(client, admin_headers, class_payload, student_payload):
    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]
    student_id = client.post("/api/students", json=student_payload, headers=admin_headers).json()["id"]

    assigned = client.put(f"/api/students/{student_id}", json={"class": class_id}, headers=admin_headers)
    assert assigned.status_code == 200
    assert assigned.json()["class"] == class_id

    bad = client.put(f"/api/students/{student_id}", json={"class": "ghost"}, headers=admin_headers)
    assert bad.status_code == 400

    cleared = client.put(f"/api/students/{student_id}", json={"class": None}, headers=admin_headers)
    assert cleared.status_code == 200
    assert cleared.json()["class"] is None


def test_delete_student(client, admin_headers, student_payload):
    student_id = client.post("/api/students", json=student_payload, headers=admin_headers).json()["id"]

    assert client.delete(f"/api/students/{student_id}", headers=admin_headers).status_code == 204
    assert client.get("/api/students", headers=admin_headers).json() == []


# ---------- delete policy: referenced rows block the delete ----------

def _person(**extra):
    values = {
        "name": "Sam",
        "gender": "Other",
        "dob": date(2000, 1, 1),
        "contact_details": "555-0100",
    }
    values.update(extra)
    return values


def test_class_delete_blocked_by_student_and_by_teacher_alike(db_session):
    classes = ClassRepository(db_session)
    by_student = classes.create({"name": "1A", "year": 2024, "student_fees": 100})
    by_teacher = classes.create({"name": "1B", "year": 2024, "student_fees": 100})
    StudentRepository(db_session).create(_person(fees_paid=0, class_id=by_student.id))
    TeacherRepository(db_session).create(_person(salary=10, assigned_class_id=by_teacher.id))

    for cls in (by_student, by_teacher):
        with pytest.raises(ConflictError):
            classes.delete(cls.id)

    assert len(classes.list()) == 2


def test_blocked_delete_over_http_is_409(client, admin_headers, class_payload, teacher_payload, student_payload):
    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]
    student_id = client.post(
        "/api/students", json={**student_payload, "class": class_id}, headers=admin_headers
    ).json()["id"]

    response = client.delete(f"/api/classes/{class_id}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["details"]["students"] == [student_id]

    client.put(f"/api/students/{student_id}", json={"class": None}, headers=admin_headers)
    assert client.delete(f"/api/classes/{class_id}", headers=admin_headers).status_code == 204


def test_teacher_delete_blocked_while_class_points_at_them(db_session):
    teacher = TeacherRepository(db_session).create(_person(salary=10))
    cls = ClassRepository(db_session).create({"name": "2A", "year": 2024, "student_fees": 0, "teacher_id": teacher.id})

    with pytest.raises(ConflictError):
        TeacherRepository(db_session).delete(teacher.id)

    ClassRepository(db_session).update(cls.id, {"teacher_id": None})
    TeacherRepository(db_session).delete(teacher.id)
    assert TeacherRepository(db_session).list() == []


def test_repository_rejects_dangling_reference(db_session):
    with pytest.raises(ReferentialError):
        TeacherRepository(db_session).create(_person(salary=1, assigned_class_id="missing"))
    assert TeacherRepository(db_session).list() == []


@pytest.mark.parametrize("path,payload_fixture,field", [
    ("/api/teachers", "teacher_payload", "salary"),
    ("/api/students", "student_payload", "feesPaid"),
])
def test_infinite_amounts_rejected(client, admin_headers, request, path, payload_fixture, field):
    payload = request.getfixturevalue(payload_fixture)
    body = json.dumps({**payload, field: 0}).replace(f'"{field}": 0', f'"{field}": 1e999')

    response = client.post(path, content=body, headers={**admin_headers, "Content-Type": "application/json"})

    assert response.status_code == 400
    assert client.get(path, headers=admin_headers).json() == []


@pytest.mark.parametrize("value", [float("inf"), float("nan"), -1])
def test_repository_rejects_non_finite_money(db_session, value):
    with pytest.raises(ValidationError):
        TeacherRepository(db_session).create(_person(salary=value))
    with pytest.raises(ValidationError):
        ClassRepository(db_session).create({"name": "1A", "year": 2024, "student_fees": value})
    assert TeacherRepository(db_session).list() == []
    assert ClassRepository(db_session).list() == []


def test_repository_rejects_out_of_range_year(db_session):
    with pytest.raises(ValidationError):
        ClassRepository(db_session).create({"name": "1A", "year": 10 ** 20, "student_fees": 0})
