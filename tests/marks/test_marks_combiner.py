from student_portal.core.enums import ExamType, SubjectType
from student_portal.marks.combiner import COMBINED_SUFFIX, combine_marks
from student_portal.marks.model import Mark
from student_portal.subjects.model import Subject

SUBJECTS = [
    Subject(subject_id="math", code="MA101", name="Maths", semester=1, subject_type=SubjectType.THEORY),
    Subject(subject_id="phys", code="PH101", name="Physics", semester=1, subject_type=SubjectType.THEORY),
    Subject(subject_id="lab", code="CL101", name="C Lab", semester=1, subject_type=SubjectType.LAB),
]


def _mark(mark_id, student_id, subject_id, obtained, total, exam_type=ExamType.UNIT_TEST_INTERNAL, name=None):
    return Mark(
        mark_id=mark_id,
        student_id=student_id,
        subject_id=subject_id,
        semester=1,
        exam_type=exam_type,
        marks_obtained=obtained,
        total_marks=total,
        subject_name=name,
    )


def _sample():
    return [
        _mark("m1", "s1", "math", 40, 50, name="Maths"),
        _mark("m2", "s1", "lab", 30, 40, ExamType.LAB_INTERNAL, name="C Lab"),
        _mark("m3", "s1", "math", 35, 50, ExamType.UNIT_TEST_EXTERNAL, name="Maths"),
        _mark("m4", "s2", "phys", 18, 20, name="Physics"),
    ]


def test_theory_rows_merge_into_percentage_of_hundred():
    out = combine_marks(_sample(), SUBJECTS)

    merged = out[0]
    assert merged.combined is True
    assert merged.mark_id == "m1"
    assert merged.marks_obtained == 75.0
    assert merged.total_marks == 100
    assert merged.subject_name == "Maths" + COMBINED_SUFFIX


def test_first_occurrence_order_and_pass_through_rows():
    out = combine_marks(_sample(), SUBJECTS)

    assert [m.mark_id for m in out] == ["m1", "m2", "m4"]
    assert out[1].combined is False and out[1].marks_obtained == 30
    # single theory row is left as it was
    assert out[2] == _sample()[3]


def test_selected_student_returns_input_unchanged():
    marks = _sample()

    assert combine_marks(marks, SUBJECTS, student_id="s1") == marks


def test_lab_filter_returns_input_unchanged():
    marks = [m for m in _sample() if m.subject_id == "lab"]

    assert combine_marks(marks, SUBJECTS, subject_type="lab") == marks


def test_input_is_not_modified():
    marks = _sample()
    snapshot = list(marks)

    combine_marks(marks, SUBJECTS)

    assert marks == snapshot


def test_combining_twice_changes_nothing_more():
    once = combine_marks(_sample(), SUBJECTS)

    assert combine_marks(once, SUBJECTS) == once


def test_merge_rounds_to_one_decimal():
    marks = [_mark("a", "s1", "math", 1, 3), _mark("b", "s1", "math", 1, 3)]

    (merged,) = combine_marks(marks, SUBJECTS)

    assert merged.marks_obtained == 33.3


def test_merge_rounds_ties_up():
    marks = [_mark("a", "s1", "math", 0, 20), _mark("b", "s1", "math", 5, 60)]

    (merged,) = combine_marks(marks, SUBJECTS)

    assert merged.marks_obtained == 6.3
    assert merged.total_marks == 100
