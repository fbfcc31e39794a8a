"""Students and their course enrolments."""

from __future__ import annotations

from typing import Optional

from uniregistry.course import Course
from uniregistry.person import Person

NO_GRADE = -1


class Student(Person):
    """A student enrolled in courses, each with a grade."""

    KIND = "Φοιτητής"

    def __init__(
        self,
        am: str,
        person_id: str,
        full_name: str,
        email: str,
        semester: int,
        birth_year: int = 0,
        address: str = "",
        phone: str = "",
    ) -> None:
        super().__init__(person_id, full_name, email, birth_year, address, phone)
        self.am = am
        self.semester = semester
        self._grades: dict[Course, int] = {}

    @property
    def courses(self) -> tuple[Course, ...]:
        """The enrolled courses, in the order of enrolment."""
        return tuple(self._grades)

    @staticmethod
    def _require(course: Optional[Course]) -> Course:
        if course is None:
            raise ValueError("Δεν δόθηκε μάθημα")
        return course

    def enroll_course(self, course: Optional[Course]) -> None:
        """Enrol in ``course``; it starts without a grade."""
        course = self._require(course)
        if course in self._grades:
            raise ValueError("Το μάθημα έχει ήδη δηλωθεί")
        self._grades[course] = NO_GRADE

    def set_grade(self, course: Optional[Course], grade: int) -> None:
        """Record ``grade`` for an enrolled course."""
        course = self._require(course)
        if course not in self._grades:
            raise ValueError("Ο φοιτητής δεν είναι εγγεγραμμένος στο μάθημα")
        self._grades[course] = grade

    def get_grade(self, course: Optional[Course]) -> int:
        """Return the grade of an enrolled course, -1 if not graded yet."""
        course = self._require(course)
        try:
            return self._grades[course]
        except KeyError:
            raise ValueError("Δεν βρέθηκε βαθμός για αυτό το μάθημα") from None

    def info_line(self) -> str:
        return ",".join(
            (
                self.KIND,
                self.person_id,
                self.full_name,
                self.email,
                self.am,
                str(self.semester),
            )
        )

    def receive_email(self, message: str) -> None:
        print(
            f"O μαθητής {self.full_name} [ {self.email} ] "
            f"έλαβε το μύνημα: {message}"
        )