import pytest

from student_portal.core.enums import SubjectType
from student_portal.core.exceptions import ValidationError
from student_portal.subjects.model import Subject
from student_portal.subjects.service import SubjectService


class InMemorySubjects:
    def __init__(self, subjects=()):
        self.subjects = list(subjects)
        self.created = []

    def list_all(self):
        return list(self.subjects)

    def create(self, subject):
        self.created.append(subject)


def _subject(sid, semester, subject_type=SubjectType.THEORY):
    return Subject(subject_id=sid, code=sid.upper(), name=sid, semester=semester, subject_type=subject_type)


@pytest.fixture
def repo():
    return InMemorySubjects([_subject("a", 1), _subject("b", 2), _subject("c", 3), _subject("d", 6)])


def test_count_for_year_uses_both_semesters(repo):
    service = SubjectService(repo)

    assert service.count_for_year(1) == 2
    assert service.count_for_year(2) == 1
    assert service.count_for_year(3) == 1


def test_list_for_semester(repo):
    assert [s.subject_id for s in SubjectService(repo).list_for_semester("3")] == ["c"]


def test_lab_subject_gets_sessional_scheme(repo):
    subject = SubjectService(repo).create_subject(
        {"code": "CL1", "name": "C Lab", "semester": "1", "branch_code": "CS", "type": "lab", "sessional": "50"}
    )

    assert subject.marks_scheme == {"sessional": 50, "external": 80}
    assert subject.to_payload()["type"] == "lab"
    assert repo.created == [subject]


def test_theory_is_the_default_type(repo):
    subject = SubjectService(repo).create_subject(
        {"code": "MA1", "name": "Maths", "semester": "2", "branch_code": "CS"}
    )

    assert subject.subject_type == SubjectType.THEORY
    assert subject.to_payload()["marks"] == {"ut": 20, "external": 80}


@pytest.mark.parametrize(
    "data",
    [
        {"code": "", "name": "x", "semester": "1", "branch_code": "CS"},
        {"code": "X", "name": "x", "semester": "9", "branch_code": "CS"},
        {"code": "X", "name": "x", "semester": "1", "branch_code": "CS", "type": "seminar"},
        {"code": "X", "name": "x", "semester": "1", "branch_code": "CS", "ut": "many"},
    ],
)
def test_invalid_subjects_are_rejected(repo, data):
    with pytest.raises(ValidationError):
        SubjectService(repo).create_subject(data)
    assert repo.created == []
