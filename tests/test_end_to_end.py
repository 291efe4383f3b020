from registrar.client import ViewState


def test_register_login_enroll_flow(api, session, controller, enrollment_service):
    created = api.register("Alice", "a@x.com", "S1", "pw")
    profile = api.login("a@x.com", "pw")
    assert profile["id"] == created["id"]
    assert profile["courses"] == []

    stored = api.update_student_courses(profile["id"], [{"code": "CS101", "name": "Intro", "credits": 3}])
    assert stored == [{"code": "CS101", "name": "Intro", "credits": 3}]
    assert api.get_student_courses(profile["id"]) == stored

    session.start(profile)
    view = controller.activate()
    assert view.total_credits == 3
    assert view.message.text == "You are enrolled in 1 course(s), total 3 credits."
    assert "CS101" not in [c["code"] for c in view.available]


def test_add_and_remove_through_the_real_server(api, session, controller):
    api.register("Bob", "b@x.com", "S2", "pw")
    session.start(api.login("b@x.com", "pw"))
    controller.activate()

    controller.add_course(controller.find_available("MATH201"))
    controller.add_course(controller.find_available("ENG110"))
    view = controller.remove_course("MATH201")

    assert controller.state is ViewState.RENDERED
    assert [c["code"] for c in view.enrolled] == ["ENG110"]
    assert view.total_credits == 2
    assert controller.find_available("ENG110") is None
    assert controller.find_available("MATH201") is not None


def test_unknown_student_session_reports_load_failure(api, session, controller):
    session.start({"id": "gone", "fullName": "Ghost", "studentId": "S0", "email": "g@x.com"})

    view = controller.activate()

    assert controller.state is ViewState.ERROR
    assert view.message.text == "Failed to load student courses."
