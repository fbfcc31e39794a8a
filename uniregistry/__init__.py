"""University register of professors, students, courses and grades, with CSV storage."""

__version__ = "0.1.0"
__all__ = ["person", "course", "student", "registry"]