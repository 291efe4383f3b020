"""
Command-line front end for the Registrar API.

The session is kept in a JSON file so it survives between invocations.

Usage:
    registrar register --full-name "Alice" --email a@x.com --student-id S1
    registrar login --email a@x.com
    registrar courses
    registrar add CS101
    registrar remove CS101
    registrar logout
"""

import argparse
import getpass
import sys

from .api_client import RegistrarClient
from .enrollment_view import CoursesView, MessageType, StatusMessage, ViewState
from .navigation import NavigationController, View
from .session import FileSessionStorage, SessionContext, default_session_path


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"
_INFO_CHAR = "ℹ" if _console_supports_utf8() else "[INFO]"


def print_message(message: StatusMessage) -> None:
    if not message.text:
        return
    if message.type is MessageType.SUCCESS:
        print(f"{_OK_CHAR} {message.text}")
    elif message.type is MessageType.ERROR:
        print(f"{_FAIL_CHAR} {message.text}")
    else:
        print(f"{_INFO_CHAR} {message.text}")


def _print_course_list(title, courses, empty_text):
    print(f"\n{'='*60}")
    print(f"{title} ({len(courses)})")
    print(f"{'='*60}")
    if not courses:
        print(f"  {empty_text}")
    for course in courses:
        print(f"  {course.get('code', '?'):8} | {course.get('name', ''):30} | {course.get('credits', 0)} credits")


def print_courses(view: CoursesView) -> None:
    _print_course_list("Available courses", view.available, "Nothing left to add.")
    _print_course_list("My courses", view.enrolled, "No courses yet. Add courses from the available list.")
    print()
    print_message(view.message)


def _read_password(args, confirm=False):
    if args.password is not None:
        return args.password, args.password
    password = getpass.getpass("Password: ")
    confirmation = getpass.getpass("Confirm password: ") if confirm else password
    return password, confirmation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="registrar", description="Registrar course-registration client")
    parser.add_argument("--base-url", type=str, default=None,
                        help="Server URL (default: $REGISTRAR_BASE_URL or http://127.0.0.1:5000)")
    parser.add_argument("--session-file", type=str, default=None,
                        help="Where the login session is stored (default: $REGISTRAR_SESSION_FILE)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    register = subparsers.add_parser("register", help="Create a student account")
    register.add_argument("--full-name", required=True)
    register.add_argument("--email", required=True)
    register.add_argument("--student-id", required=True)
    register.add_argument("--password", default=None, help="Prompted for when omitted")

    login = subparsers.add_parser("login", help="Log in and show your courses")
    login.add_argument("--email", required=True)
    login.add_argument("--password", default=None, help="Prompted for when omitted")

    subparsers.add_parser("logout", help="Forget the stored session")
    subparsers.add_parser("whoami", help="Show the logged-in student")
    subparsers.add_parser("courses", help="Show available and enrolled courses")

    add = subparsers.add_parser("add", help="Add a course by code")
    add.add_argument("code")

    remove = subparsers.add_parser("remove", help="Remove a course by code")
    remove.add_argument("code")

    return parser


def run(args, navigation: NavigationController) -> int:
    """Execute one command; returns the process exit code."""
    enrollment = navigation.enrollment_view

    if args.command == "register":
        password, confirmation = _read_password(args, confirm=True)
        ok = navigation.register(args.full_name, args.email, args.student_id, password, confirmation)
        print_message(navigation.register_message)
        return 0 if ok else 1

    if args.command == "login":
        password, _ = _read_password(args)
        ok = navigation.login(args.email, password)
        print_message(navigation.login_message)
        if ok:
            print(navigation.welcome_text)
            print_courses(enrollment.view)
        return 0 if ok else 1

    if args.command == "logout":
        navigation.logout()
        print(f"{_OK_CHAR} Logged out.")
        return 0

    if args.command == "whoami":
        text = navigation.welcome_text
        print(text or "Not logged in.")
        return 0 if text else 1

    if not navigation.show(View.COURSES):
        print(f"{_FAIL_CHAR} {navigation.alert}")
        return 1
    if enrollment.state is not ViewState.RENDERED:
        print_message(enrollment.view.message)
        return 1

    if args.command == "add":
        code = args.code.upper()
        course = enrollment.find_available(code)
        if course is None:
            print(f"{_FAIL_CHAR} {code} is not an available course.")
            return 1
        enrollment.add_course(course)
    elif args.command == "remove":
        enrollment.remove_course(args.code.upper())

    print_courses(enrollment.view)
    return 0 if enrollment.state is ViewState.RENDERED else 1


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    session = SessionContext(FileSessionStorage(args.session_file or default_session_path()))
    navigation = NavigationController(RegistrarClient(args.base_url), session)
    try:
        return run(args, navigation)
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
