import pytest

from student_portal.core.enums import Role
from student_portal.core.exceptions import AuthenticationError, ValidationError
from student_portal.users.model import AuthUser, Credentials
from student_portal.users.service import AuthService
from student_portal.users.session import SessionStore

FACULTY = AuthUser(user_id="u1", email="fac@college.edu", full_name="Dr. Rao", role=Role.FACULTY)


class FakeAuth:
    def __init__(self, user=FACULTY, error=None):
        self.user = user
        self.error = error
        self.sign_ins = []
        self.sign_ups = []

    def sign_in(self, credentials):
        self.sign_ins.append(credentials)
        if self.error:
            raise self.error
        return self.user

    def sign_up(self, *, email, password, full_name, role):
        self.sign_ups.append((email, password, full_name, role))
        return AuthUser(user_id="new", email=email, full_name=full_name, role=role)


def test_student_signs_in_with_roll_number():
    auth = FakeAuth()

    AuthService(auth).sign_in(password="pw", roll_number=" CS001 ", role="student")

    (credentials,) = auth.sign_ins
    assert credentials.to_payload() == {"role": "student", "roll_number": "CS001", "password": "pw"}


def test_faculty_signs_in_with_email():
    auth = FakeAuth()

    user = AuthService(auth).sign_in(password="secret1", email="fac@college.edu", role="faculty")

    assert user == FACULTY
    assert auth.sign_ins == [Credentials(password="secret1", email="fac@college.edu")]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"password": "pw", "roll_number": "", "role": "student"},
        {"password": "", "roll_number": "CS001", "role": "student"},
        {"password": "secret1", "email": "not-an-email", "role": "faculty"},
        {"password": "short", "email": "fac@college.edu", "role": "faculty"},
    ],
)
def test_sign_in_validates_before_calling_backend(kwargs):
    auth = FakeAuth()

    with pytest.raises(ValidationError):
        AuthService(auth).sign_in(**kwargs)
    assert auth.sign_ins == []


def test_backend_rejection_propagates():
    auth = FakeAuth(error=AuthenticationError("Invalid credentials"))

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        AuthService(auth).sign_in(password="secret1", email="fac@college.edu")


def test_sign_up_trims_name_and_checks_role():
    auth = FakeAuth()
    service = AuthService(auth)

    user = service.sign_up(email="new@college.edu", password="secret1", full_name="  Meera  ", role="student")

    assert user.full_name == "Meera"
    assert user.role == Role.STUDENT
    with pytest.raises(ValidationError):
        service.sign_up(email="x@college.edu", password="secret1", full_name="Admin", role="admin")
    with pytest.raises(ValidationError):
        service.sign_up(email="x@college.edu", password="secret1", full_name="A", role="faculty")


def test_session_store_round_trips_user():
    storage = {}
    store = SessionStore(storage)

    assert store.load() is None
    store.establish(FACULTY)
    assert storage["auth_user"]["role"] == "faculty"
    assert SessionStore(storage).load() == FACULTY

    store.clear()
    assert store.load() is None
    assert "auth_user" not in storage


def test_session_store_discards_corrupt_snapshot():
    storage = {"auth_user": {"user_id": "u1", "role": "janitor"}}

    assert SessionStore(storage).load() is None
    assert storage == {}


def test_auth_user_from_api_accepts_mongo_id():
    user = AuthUser.from_api({"_id": "abc", "email": "s@x.io", "full_name": "S", "role": "student"})

    assert user.user_id == "abc"
    assert user.role == Role.STUDENT
