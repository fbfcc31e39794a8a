import io

from uniregistry.course import UNASSIGNED, Course
from uniregistry.person import Professor


def make_professor():
    return Professor("12345", "K001", "Kostas", "kostas@example.com", "Programming")


def test_info_line_with_professor():
    course = Course("CS101", "Intro", 2, make_professor())
    assert course.info_line() == "CS101,Intro,2,12345"


def test_info_line_without_professor():
    course = Course("CS102", "Logic", 1, None)
    assert course.info_line() == "CS102,Logic,1,Δεν έχει ανατεθεί"
    assert course.info_line().endswith(UNASSIGNED)


def test_display_course_info():
    course = Course("CS101", "Intro", 2, make_professor())
    out = io.StringIO()
    course.display_course_info(out)
    assert out.getvalue() == course.info_line() + "\n"


def test_courses_compare_by_identity():
    first = Course("CS101", "Intro", 2)
    second = Course("CS101", "Intro", 2)
    assert first == first
    assert not (first == second)


def test_fields_are_editable():
    course = Course("CS101", "Intro", 2)
    prof = make_professor()
    course.course_name = "Advanced"
    course.semester = 4
    course.professor = prof
    assert course.info_line() == "CS101,Advanced,4,12345"