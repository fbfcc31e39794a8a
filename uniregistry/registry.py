"""The registry of members and courses, with CSV storage."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, TextIO

from uniregistry.course import Course
from uniregistry.person import Person, Professor
from uniregistry.student import Student

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class RegistryError(Exception):
    """Raised when a registry operation cannot be carried out."""


def _to_int(text: str) -> int:
    """Read a leading integer from ``text``, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _fields(line: str, count: int) -> list[str]:
    parts = line.split(",")[:count]
    return parts + [""] * (count - len(parts))


def _lines(stream: Iterable[str]) -> Iterable[str]:
    for line in stream:
        yield line.removesuffix("\n")


class SystemRegister:
    """Holds the university's members and courses."""

    def __init__(self) -> None:
        self.courses: list[Course] = []
        self.members: list[Person] = []

    def _find_course(self, course_id: str) -> Optional[Course]:
        return next((c for c in self.courses if c.course_id == course_id), None)

    def _find_member(self, member_id: str) -> Optional[Person]:
        return next((m for m in self.members if m.person_id == member_id), None)

    def _member_index(self, member_id: str) -> int:
        for index, member in enumerate(self.members):
            if member.person_id == member_id:
                return index
        raise RegistryError("Το μέλος δε βρέθηκε")

    def add_course(self, course: Course) -> None:
        """Add a course whose id is not yet registered."""
        if self._find_course(course.course_id):
            raise RegistryError("Το μάθημα υπάρχει ήδη")
        self.courses.append(course)

    def edit_course(
        self,
        course_id: str,
        new_name: str,
        new_semester: int,
        new_professor: Optional[Professor],
    ) -> None:
        """Change name, semester and professor of a registered course."""
        course = self._find_course(course_id)
        if course is None:
            raise RegistryError("Το μάθημα δε βρέθηκε")
        course.course_name = new_name
        course.semester = new_semester
        course.professor = new_professor

    def remove_course(self, course_id: str) -> None:
        """Remove the course with the given id."""
        course = self._find_course(course_id)
        if course is None:
            raise RegistryError("Το μάθημα δεν βρέθηκε")
        self.courses.remove(course)

    def add_member(self, person: Person) -> None:
        """Add a member whose id is not yet registered."""
        if self._find_member(person.person_id):
            raise RegistryError("Το μέλος υπάρχει ήδη")
        self.members.append(person)

    def edit_member(self, member_id: str, new_member: Person) -> None:
        """Replace the member with the given id by ``new_member``."""
        self.members[self._member_index(member_id)] = new_member

    def remove_member(self, member_id: str) -> None:
        """Remove the member with the given id."""
        index = self._member_index(member_id)
        self.members.pop(index)

    def send_email_to_professors(self, message: str) -> None:
        """Deliver ``message`` to every professor."""
        for member in self.members:
            if isinstance(member, Professor):
                member.receive_email(message)

    def send_email_to_students(self, message: str) -> None:
        """Deliver ``message`` to every student."""
        for member in self.members:
            if isinstance(member, Student):
                member.receive_email(message)

    def set_student_grade(self, student_id: str, course_id: str, grade: int) -> None:
        """Record a grade for a registered student in a registered course."""
        member = self._find_member(student_id)
        if member is None:
            raise RegistryError("Ο μαθητής δε βρέθηκε")
        if not isinstance(member, Student):
            raise RegistryError("Το μέλος δεν είναι μαθητής")
        course = self._find_course(course_id)
        if course is None:
            raise RegistryError("Το μάθημα δε βρέθηκε")
        member.set_grade(course, grade)

    def save_to_csv(self, courses_file, members_file) -> None:
        """Write courses and members to the two files."""
        try:
            with open(courses_file, "w", encoding="utf-8") as out:
                for course in self.courses:
                    course.display_course_info(out)
        except OSError as exc:
            raise RegistryError(
                "Αδύνατο το άνοιγμα του αρχείου των μαθημάτων"
            ) from exc
        try:
            with open(members_file, "w", encoding="utf-8") as out:
                for member in self.members:
                    member.display_info(out)
        except OSError as exc:
            raise RegistryError("Αδύνατο το άνοιγμα του αρχείου των μελών") from exc

    def load_from_csv(self, courses_file, members_file) -> None:
        """Replace the registry's contents with those of the two files.

        Members of unknown kind and courses whose professor is not found
        are reported on standard error and skipped.
        """
        self.courses.clear()
        self.members.clear()

        try:
            with open(members_file, encoding="utf-8") as stream:
                for line in _lines(stream):
                    self._load_member(line)
        except OSError as exc:
            raise RegistryError("Αδύνατο το άνοιγμα του αρχείου των μελών") from exc

        try:
            with open(courses_file, encoding="utf-8") as stream:
                for line in _lines(stream):
                    self._load_course(line)
        except OSError as exc:
            raise RegistryError(
                "Αδύνατο το άνοιγμα του αρχείου των μαθημάτων"
            ) from exc

    def _load_member(self, line: str) -> None:
        kind, person_id, name, email, first, second = _fields(line, 6)
        if kind == Student.KIND:
            self.members.append(Student(first, person_id, name, email, _to_int(second)))
        elif kind == Professor.KIND:
            self.members.append(Professor(first, person_id, name, email, second))
        else:
            print("Άγνωστος τύπος μέλους", file=sys.stderr)

    def _load_course(self, line: str) -> None:
        course_id, name, semester, prof_id = _fields(line, 4)
        professor = next(
            (
                m
                for m in self.members
                if isinstance(m, Professor) and m.prof_id == prof_id
            ),
            None,
        )
        if professor is None:
            print("Δεν βρέθηκε καθηγητής", file=sys.stderr)
            return
        self.courses.append(Course(course_id, name, _to_int(semester), professor))

    def display_system(self, output: Optional[TextIO] = None) -> None:
        """Write every member and course to ``output`` (standard output)."""
        out = output if output is not None else sys.stdout
        if not self.members:
            out.write("Δεν υπάρχει κανένα μέλος\n")
        else:
            out.write("----ΜΕΛΗ ΣΥΣΤΉΜΑΤΟΣ----\n")
            for member in self.members:
                member.display_info(out)
        if not self.courses:
            out.write("Δεν υπάρχει κανένα μάθημα\n")
        else:
            out.write("----ΜΑΘΗΜΑΤΑ----\n")
            for course in self.courses:
                course.display_course_info(out)


def main(argv=None) -> int:
    """Build a sample registry, store it, load it back and send mail."""
    parser = argparse.ArgumentParser(description="University registry demo")
    parser.add_argument("--courses", default="courses.csv", help="courses file")
    parser.add_argument("--members", default="members.csv", help="members file")
    args = parser.parse_args(argv)

    registry = SystemRegister()
    professor = Professor(
        "12345", "Κ001", "Κώστας Παπαδόπουλος", "kostas@example.com", "Προγραμματισμός"
    )
    registry.add_member(professor)
    student = Student("24390042", "Φ001", "Στέλιος Σπανός", "stelios@example.com", 2)
    registry.add_member(student)
    course = Course("CS101", "Εισαγωγή στον Προγραμματισμό", 2, professor)
    registry.add_course(course)

    student.enroll_course(course)
    registry.set_student_grade("Φ001", "CS101", 5)

    registry.display_system()
    registry.save_to_csv(args.courses, args.members)

    loaded = SystemRegister()
    loaded.load_from_csv(args.courses, args.members)
    print("----Μετά την φόρτωση από CSV----")
    loaded.display_system()

    loaded.send_email_to_students("16/6 Εξέταση")
    loaded.send_email_to_professors("13:00 Συνέδριο Καθηγητών")
    return 0


if __name__ == "__main__":
    sys.exit(main())