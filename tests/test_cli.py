import pytest

from registrar.client import NavigationController, SessionContext, FileSessionStorage
from registrar.client.cli import build_parser, run


@pytest.fixture
def cli(api, tmp_path, capsys):
    session_file = str(tmp_path / "session.json")

    def invoke(*argv):
        args = build_parser().parse_args(list(argv))
        # A fresh controller per command, like separate process invocations.
        navigation = NavigationController(api, SessionContext(FileSessionStorage(session_file)))
        code = run(args, navigation)
        return code, capsys.readouterr().out

    return invoke


def test_full_cli_session(cli):
    code, out = cli("register", "--full-name", "Alice", "--email", "a@x.com", "--student-id", "S1", "--password", "pw")
    assert code == 0 and "Registration successful!" in out

    code, out = cli("login", "--email", "a@x.com", "--password", "pw")
    assert code == 0 and "Hi, Alice (S1)" in out

    code, out = cli("add", "cs101")
    assert code == 0 and "Added CS101 to your courses." in out

    code, out = cli("courses")
    assert "You are enrolled in 1 course(s), total 3 credits." in out

    code, out = cli("remove", "CS101")
    assert code == 0 and "Removed CS101 from your courses." in out

    code, out = cli("logout")
    assert code == 0

    code, out = cli("courses")
    assert code == 1 and "Please login first" in out


def test_add_unknown_course(cli):
    cli("register", "--full-name", "Bob", "--email", "b@x.com", "--student-id", "S2", "--password", "pw")
    cli("login", "--email", "b@x.com", "--password", "pw")

    code, out = cli("add", "NOPE1")
    assert code == 1 and "NOPE1 is not an available course." in out


def test_whoami_logged_out(cli):
    code, out = cli("whoami")
    assert code == 1 and "Not logged in." in out
