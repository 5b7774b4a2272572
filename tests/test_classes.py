def test_admin_creates_class_and_lists_it(client, admin_headers, class_payload):
    response = client.post("/api/classes", json=class_payload, headers=admin_headers)

    assert response.status_code == 201
    created = response.json()
    assert created["id"]
    assert created["studentFees"] == 1000
    assert created["teacher"] is None

    listed = client.get("/api/classes", headers=admin_headers).json()
    assert [c["id"] for c in listed].count(created["id"]) == 1


def test_every_role_can_read_classes(client, admin_headers, teacher_headers, student_headers, class_payload):
    client.post("/api/classes", json=class_payload, headers=admin_headers)

    for headers in (admin_headers, teacher_headers, student_headers):
        response = client.get("/api/classes", headers=headers)
        assert response.status_code == 200
        assert len(response.json()) == 1


def test_class_writes_are_admin_only(client, admin_headers, teacher_headers, student_headers, class_payload):
    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]

    assert client.post("/api/classes", json=class_payload, headers=teacher_headers).status_code == 403
    assert client.put(f"/api/classes/{class_id}", json={"year": 2025}, headers=student_headers).status_code == 403
    assert client.delete(f"/api/classes/{class_id}", headers=teacher_headers).status_code == 403
    assert client.get("/api/classes").status_code == 401


def test_list_keeps_insertion_order(client, admin_headers):
    names = ["3C", "1A", "2B"]
    for name in names:
        client.post("/api/classes", json={"name": name, "year": 2024, "studentFees": 10}, headers=admin_headers)

    listed = client.get("/api/classes", headers=admin_headers).json()
    assert [c["name"] for c in listed] == names


def test_create_class_validation(client, admin_headers):
    bad_payloads = [
        {"name": "", "year": 2024, "studentFees": 10},
        {"name": "1A", "year": 2024, "studentFees": -1},
        {"name": "1A", "studentFees": 10},
        {"name": "   ", "year": 2024, "studentFees": 10},
    ]
    for payload in bad_payloads:
        assert client.post("/api/classes", json=payload, headers=admin_headers).status_code == 400

    assert client.get("/api/classes", headers=admin_headers).json() == []


def test_class_teacher_reference_must_exist(client, admin_headers, class_payload, teacher_payload):
    response = client.post("/api/classes", json={**class_payload, "teacher": "missing"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "REFERENCE_NOT_FOUND"

    teacher_id = client.post("/api/teachers", json=teacher_payload, headers=admin_headers).json()["id"]
    response = client.post("/api/classes", json={**class_payload, "teacher": teacher_id}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["teacher"] == teacher_id


def test_update_class(client, admin_headers, class_payload):
    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]

    response = client.put(f"/api/classes/{class_id}", json={"studentFees": 1500}, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["studentFees"] == 1500
    assert body["name"] == "1A"
    assert client.put("/api/classes/nope", json={"year": 2025}, headers=admin_headers).status_code == 404
    assert client.put(f"/api/classes/{class_id}", json={"name": None}, headers=admin_headers).status_code == 400


def test_delete_class(client, admin_headers, class_payload):
    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]

    assert client.delete(f"/api/classes/{class_id}", headers=admin_headers).status_code == 204
    assert client.get("/api/classes", headers=admin_headers).json() == []
    assert client.delete(f"/api/classes/{class_id}", headers=admin_headers).status_code == 404


def test_class_details(client, admin_headers, teacher_headers, student_headers, class_payload, teacher_payload, student_payload):
    teacher_id = client.post("/api/teachers", json=teacher_payload, headers=admin_headers).json()["id"]
    class_id = client.post(
        "/api/classes", json={**class_payload, "teacher": teacher_id}, headers=admin_headers
    ).json()["id"]
    client.post("/api/students", json={**student_payload, "class": class_id}, headers=admin_headers)

    assert client.get(f"/api/classes/{class_id}", headers=student_headers).status_code == 403
    response = client.get(f"/api/classes/{class_id}", headers=teacher_headers)

    assert response.status_code == 200
    details = response.json()
    assert details["teacher"]["id"] == teacher_id
    assert len(details["students"]) == 1
    assert details["students"][0]["class"] == class_id
    assert client.get("/api/classes/unknown", headers=admin_headers).status_code == 404


def test_out_of_range_year_is_rejected(client, admin_headers, class_payload):
    for year in (10 ** 20, 10000, 0):
        response = client.post("/api/classes", json={**class_payload, "year": year}, headers=admin_headers)
        assert response.status_code == 400

    class_id = client.post("/api/classes", json=class_payload, headers=admin_headers).json()["id"]
    assert client.put(f"/api/classes/{class_id}", json={"year": 10 ** 20}, headers=admin_headers).status_code == 400


def test_infinite_fees_are_rejected(client, admin_headers):
    body = '{"name": "1A", "year": 2024, "studentFees": 1e999}'

    response = client.post(
        "/api/classes",
        content=body,
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert client.get("/api/classes", headers=admin_headers).json() == []
    assert client.get("/api/analytics/finance", headers=admin_headers).json()["totalFees"] == 0
