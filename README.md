# uniregistry

A small register for a university department. It keeps professors,
students and courses, records students' enrolments and grades, and saves
the register to two CSV files and loads it back from them.

Record labels and all messages the package prints or raises are in Greek.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
uniregistry [--courses FILE] [--members FILE]
```

The command runs a short demonstration. It builds a register with one
professor, one student and one course, enrols the student and records a
grade. It prints the register and saves it to the courses file and the
members file (by default `courses.csv` and `members.csv` in the current
directory). It then loads those files into a fresh register, prints that
register, and sends a message to all students and to all professors.

The same demonstration runs with `python -m uniregistry.registry`.

## Library use

```python
import sys

from uniregistry.person import Professor
from uniregistry.student import Student
from uniregistry.course import Course
from uniregistry.registry import SystemRegister, RegistryError

reg = SystemRegister()

prof = Professor("12345", "K001", "Jane Doe", "jane@example.com", "Programming")
student = Student("24390042", "S001", "John Roe", "john@example.com", 2)
reg.add_member(prof)
reg.add_member(student)

course = Course("CS101", "Introduction to Programming", 2, prof)
reg.add_course(course)

student.enroll_course(course)
reg.set_student_grade("S001", "CS101", 5)
print(student.get_grade(course))          # 5

reg.display_system(sys.stdout)
reg.save_to_csv("courses.csv", "members.csv")

other = SystemRegister()
other.load_from_csv("courses.csv", "members.csv")
other.send_email_to_students("Exam on 16/6")
other.send_email_to_professors("Staff meeting at 13:00")
```

### Modules

- `uniregistry.person` — `Person`, an abstract member with id, full name,
  e-mail and optional birth year, address and phone;
  `calculate_age(current_year)` returns the age, never below zero.
  `Professor` adds a professor id and a specialty.
- `uniregistry.student` — `Student` adds a registration number (`am`) and a
  semester. `enroll_course`, `set_grade` and `get_grade` manage grades;
  a newly enrolled course has grade `-1` until one is set. The `courses`
  property lists enrolled courses in enrolment order.
- `uniregistry.course` — `Course`, a dataclass of id, name, semester and an
  optional professor.
- `uniregistry.registry` — `SystemRegister`, `RegistryError` and the
  `main` command.

### The register

- `add_course`, `edit_course` and `remove_course` manage courses by id.
- `add_member`, `edit_member` and `remove_member` manage members by id;
  `edit_member` replaces the member in place.
- `set_student_grade` records a grade for a registered student in a
  registered course the student is enrolled in.
- `send_email_to_students` and `send_email_to_professors` deliver a message
  to every member of that kind; delivery prints a line to standard output.
- `save_to_csv` and `load_from_csv` write and read the register.
- `display_system(output)` writes a listing to a text stream, standard
  output if none is given.

Register operations that cannot be carried out raise `RegistryError`:
a duplicate id, an unknown id, a member who is not a student, or a file
that cannot be opened. Enrolment and grading on a `Student` raise
`ValueError` for a missing course, a course enrolled twice, or a course the
student is not enrolled in; through `set_student_grade` that `ValueError`
passes through unchanged.

### CSV layout

Files are UTF-8, one record per line, fields separated by commas.

Courses: `course id,name,semester,professor id`. A course without a
professor writes a fixed placeholder text instead of the professor id.

Members begin with their kind, `Φοιτητής` for a student and `Καθηγητής`
for a professor. A student line continues with id, name, e-mail,
registration number and semester; a professor line with id, name, e-mail,
professor id and specialty.

Loading first empties the register, then reads members and then courses:

- A member line of unknown kind is reported on standard error and skipped.
- A course whose professor id matches no loaded professor, including a
  course saved without a professor, is reported and skipped.
- A semester that does not begin with a number is read as 0.

## Limitations

- Birth year, address, phone, enrolments and grades are not written to the
  files, so a loaded register has none of them.
- Field values are not quoted, so a comma inside a name or other field
  breaks the record on loading.
- There is no interactive interface; the command only runs the fixed
  demonstration above.
- E-mail delivery only prints a line; no mail is sent.