import io

import pytest

from uniregistry.course import Course
from uniregistry.person import Professor
from uniregistry.registry import RegistryError, SystemRegister, main
from uniregistry.student import Student


@pytest.fixture
def professor():
    return Professor("12345", "K001", "Kostas", "kostas@example.com", "Programming")


@pytest.fixture
def student():
    return Student("24390042", "F001", "Stelios", "stelios@example.com", 2)


@pytest.fixture
def registry(professor, student):
    reg = SystemRegister()
    reg.add_member(professor)
    reg.add_member(student)
    reg.add_course(Course("CS101", "Intro", 2, professor))
    return reg


def test_add_duplicate_course(registry):
    with pytest.raises(RegistryError, match="υπάρχει ήδη"):
        registry.add_course(Course("CS101", "Other", 1))


def test_add_duplicate_member(registry):
    with pytest.raises(RegistryError, match="υπάρχει ήδη"):
        registry.add_member(Student("1", "F001", "X", "x@example.com", 1))


def test_edit_course(registry):
    registry.edit_course("CS101", "Advanced", 4, None)
    assert registry.courses[0].info_line() == "CS101,Advanced,4,Δεν έχει ανατεθεί"


def test_edit_missing_course(registry):
    with pytest.raises(RegistryError):
        registry.edit_course("NOPE", "X", 1, None)


def test_remove_course(registry):
    registry.remove_course("CS101")
    assert registry.courses == []
    with pytest.raises(RegistryError):
        registry.remove_course("CS101")


def test_edit_member_replaces_in_place(registry):
    replacement = Student("777", "F002", "Maria", "maria@example.com", 3)
    registry.edit_member("K001", replacement)
    assert registry.members[0] is replacement
    with pytest.raises(RegistryError):
        registry.edit_member("K001", replacement)


def test_remove_member(registry, professor):
    registry.remove_member("F001")
    assert registry.members == [professor]
    with pytest.raises(RegistryError):
        registry.remove_member("F001")


def test_set_student_grade(registry, student):
    course = registry.courses[0]
    student.enroll_course(course)
    registry.set_student_grade("F001", "CS101", 5)
    assert student.get_grade(course) == 5


def test_set_grade_errors(registry):
    with pytest.raises(RegistryError, match="Ο μαθητής δε βρέθηκε"):
        registry.set_student_grade("NONE", "CS101", 5)
    with pytest.raises(RegistryError, match="δεν είναι μαθητής"):
        registry.set_student_grade("K001", "CS101", 5)
    with pytest.raises(RegistryError, match="Το μάθημα δε βρέθηκε"):
        registry.set_student_grade("F001", "NONE", 5)


def test_set_grade_not_enrolled(registry):
    with pytest.raises(ValueError):
        registry.set_student_grade("F001", "CS101", 5)


def test_emails_go_to_right_kind(registry, capsys):
    registry.send_email_to_students("Exam")
    out = capsys.readouterr().out
    assert out.startswith("O μαθητής Stelios")
    assert "Kostas" not in out
    registry.send_email_to_professors("Meeting")
    out = capsys.readouterr().out
    assert out.startswith("Ο καθηγητής Kostas")
    assert "Stelios" not in out


def test_save_and_load_round_trip(registry, tmp_path):
    courses = tmp_path / "courses.csv"
    members = tmp_path / "members.csv"
    registry.save_to_csv(courses, members)

    loaded = SystemRegister()
    loaded.load_from_csv(courses, members)
    assert [m.info_line() for m in loaded.members] == [
        m.info_line() for m in registry.members
    ]
    assert [c.info_line() for c in loaded.courses] == [
        c.info_line() for c in registry.courses
    ]
    assert loaded.courses[0].professor is loaded.members[0]


def test_saved_format(registry, tmp_path):
    courses = tmp_path / "c.csv"
    members = tmp_path / "m.csv"
    registry.save_to_csv(courses, members)
    assert courses.read_text(encoding="utf-8") == "CS101,Intro,2,12345\n"
    assert members.read_text(encoding="utf-8").splitlines()[1] == (
        "Φοιτητής,F001,Stelios,stelios@example.com,24390042,2"
    )


def test_load_skips_unknown_and_unmatched(tmp_path, capsys):
    members = tmp_path / "m.csv"
    courses = tmp_path / "c.csv"
    members.write_text("Other,X1,Name,n@example.com,a,b\n", encoding="utf-8")
    courses.write_text("CS200,Logic,3,Δεν έχει ανατεθεί\n", encoding="utf-8")
    reg = SystemRegister()
    reg.load_from_csv(courses, members)
    assert reg.members == []
    assert reg.courses == []
    err = capsys.readouterr().err
    assert "Άγνωστος τύπος μέλους" in err
    assert "Δεν βρέθηκε καθηγητής" in err


def test_load_non_numeric_semester(tmp_path):
    members = tmp_path / "m.csv"
    courses = tmp_path / "c.csv"
    members.write_text("Φοιτητής,F9,Name,n@example.com,111,abc\n", encoding="utf-8")
    courses.write_text("", encoding="utf-8")
    reg = SystemRegister()
    reg.load_from_csv(courses, members)
    assert reg.members[0].semester == 0


def test_load_missing_file_clears_and_raises(registry, tmp_path):
    with pytest.raises(RegistryError, match="μελών"):
        registry.load_from_csv(tmp_path / "c.csv", tmp_path / "missing.csv")
    assert registry.members == []
    assert registry.courses == []


def test_save_to_unwritable_path(registry, tmp_path):
    with pytest.raises(RegistryError, match="μαθημάτων"):
        registry.save_to_csv(tmp_path / "no" / "c.csv", tmp_path / "m.csv")


def test_display_empty_system():
    out = io.StringIO()
    SystemRegister().display_system(out)
    assert out.getvalue() == "Δεν υπάρχει κανένα μέλος\nΔεν υπάρχει κανένα μάθημα\n"


def test_display_system(registry):
    out = io.StringIO()
    registry.display_system(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "----ΜΕΛΗ ΣΥΣΤΉΜΑΤΟΣ----"
    assert lines[3] == "----ΜΑΘΗΜΑΤΑ----"
    assert lines[4] == "CS101,Intro,2,12345"


def test_main(tmp_path, capsys):
    courses = tmp_path / "courses.csv"
    members = tmp_path / "members.csv"
    assert main(["--courses", str(courses), "--members", str(members)]) == 0
    out = capsys.readouterr().out
    assert "----Μετά την φόρτωση από CSV----" in out
    assert "16/6 Εξέταση" in out
    assert "13:00 Συνέδριο Καθηγητών" in out
    assert courses.read_text(encoding="utf-8").startswith("CS101,")