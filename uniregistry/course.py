"""Courses offered by the university."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from uniregistry.person import Professor

UNASSIGNED = "Δεν έχει ανατεθεί"


@dataclass(eq=False)
class Course:
    """A course taught in a semester, optionally by a professor."""

    course_id: str
    course_name: str
    semester: int
    professor: Optional[Professor] = None

    def info_line(self) -> str:
        """Return the record line for this course."""
        teacher = self.professor.prof_id if self.professor else UNASSIGNED
        return f"{self.course_id},{self.course_name},{self.semester},{teacher}"

    def display_course_info(self, output: TextIO) -> None:
        """Write the record line, with a line break, to ``output``."""
        output.write(self.info_line() + "\n")