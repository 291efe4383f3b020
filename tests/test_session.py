import json

from registrar.client.session import (
    CURRENT_STUDENT_ID_KEY, CURRENT_STUDENT_INFO_KEY,
    FileSessionStorage, MemorySessionStorage, SessionContext,
)

PROFILE = {"id": "abc", "fullName": "Alice", "email": "a@x.com", "studentId": "S1", "courses": []}


def test_new_session_is_logged_out():
    session = SessionContext(MemorySessionStorage())
    assert session.student_id is None
    assert session.student_info is None
    assert not session.is_authenticated


def test_start_and_clear():
    storage = MemorySessionStorage()
    session = SessionContext(storage)

    session.start(PROFILE)
    assert session.is_authenticated
    assert session.student_id == "abc"
    assert session.student_info == PROFILE
    assert json.loads(storage.get_item(CURRENT_STUDENT_INFO_KEY)) == PROFILE

    session.clear()
    assert storage.get_item(CURRENT_STUDENT_ID_KEY) is None
    assert not session.is_authenticated


def test_missing_either_key_means_logged_out():
    storage = MemorySessionStorage()
    session = SessionContext(storage)
    session.start(PROFILE)

    storage.remove_item(CURRENT_STUDENT_INFO_KEY)
    assert not session.is_authenticated


def test_corrupt_profile_reads_as_absent():
    storage = MemorySessionStorage()
    storage.set_item(CURRENT_STUDENT_ID_KEY, "abc")
    storage.set_item(CURRENT_STUDENT_INFO_KEY, "{not json")

    assert SessionContext(storage).student_info is None


def test_file_storage_survives_new_instances(tmp_path):
    path = str(tmp_path / "nested" / "session.json")
    SessionContext(FileSessionStorage(path)).start(PROFILE)

    restored = SessionContext(FileSessionStorage(path))
    assert restored.student_info == PROFILE

    restored.clear()
    assert not SessionContext(FileSessionStorage(path)).is_authenticated


def test_file_storage_tolerates_garbage(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("[[[", encoding="utf-8")

    storage = FileSessionStorage(str(path))
    assert storage.get_item(CURRENT_STUDENT_ID_KEY) is None
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"
