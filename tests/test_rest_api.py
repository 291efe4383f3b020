REGISTER = {"fullName": "Alice", "email": "A@X.com", "studentId": "S1", "password": "pw"}


def register(http, **overrides):
    return http.post("/api/register", json={**REGISTER, **overrides})


def test_health(http):
    response = http.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_created(http):
    response = register(http)

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "a@x.com"
    assert set(body) == {"id", "fullName", "email", "studentId"}


def test_register_missing_field(http):
    response = http.post("/api/register", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields."}


def test_register_duplicate_email(http):
    register(http)
    response = register(http, email="a@X.COM")

    assert response.status_code == 409
    assert response.json() == {"message": "An account with this email already exists."}


def test_malformed_body_is_400_with_message(http):
    response = http.post("/api/register", content=b"not json",
                         headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert "message" in response.json()


def test_login(http):
    created = register(http).json()
    response = http.post("/api/login", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == 200
    assert response.json() == {**created, "courses": []}


def test_login_errors(http):
    register(http)

    missing = http.post("/api/login", json={"email": "a@x.com"})
    wrong = http.post("/api/login", json={"email": "a@x.com", "password": "bad"})
    unknown = http.post("/api/login", json={"email": "b@x.com", "password": "pw"})

    assert missing.status_code == 400
    assert missing.json() == {"message": "Email and password are required."}
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Invalid email or password."}


def test_courses_catalog(http):
    response = http.get("/api/courses")

    assert response.status_code == 200
    assert response.json()[0] == {"code": "CS101", "name": "Introduction to Programming", "credits": 3}
    assert len(response.json()) == 5


def test_student_courses_round_trip(http):
    student_id = register(http).json()["id"]
    courses = [{"code": "CS101", "name": "Intro", "credits": 3}]

    put = http.put(f"/api/students/{student_id}/courses", json={"courses": courses})
    get = http.get(f"/api/students/{student_id}/courses")

    assert put.status_code == 200
    assert put.json() == courses
    assert get.json() == courses


def test_student_courses_unknown_id(http):
    get = http.get("/api/students/nope/courses")
    put = http.put("/api/students/nope/courses", json={"courses": []})

    assert get.status_code == put.status_code == 404
    assert get.json() == {"message": "Student not found."}


def test_put_non_array_is_400_and_keeps_state(http):
    student_id = register(http).json()["id"]
    courses = [{"code": "CS101", "name": "Intro", "credits": 3}]
    http.put(f"/api/students/{student_id}/courses", json={"courses": courses})

    response = http.put(f"/api/students/{student_id}/courses", json={"courses": "CS101"})

    assert response.status_code == 400
    assert response.json() == {"message": "Courses must be an array."}
    assert http.get(f"/api/students/{student_id}/courses").json() == courses


def test_unexpected_failure_hides_details(http, platform, monkeypatch):
    def explode(student_id):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(platform.enrollment_service, "get_enrollment", explode)
    response = http.get("/api/students/any/courses")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error."}
