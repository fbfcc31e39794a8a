"""University members: the abstract person and the professor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO


class Person(ABC):
    """A member of the university with identity and contact details."""

    def __init__(
        self,
        person_id: str,
        full_name: str,
        email: str,
        birth_year: int = 0,
        address: str = "",
        phone: str = "",
    ) -> None:
        self.person_id = person_id
        self.full_name = full_name
        self.email = email
        self.birth_year = birth_year
        self.address = address
        self.phone = phone

    def calculate_age(self, current_year: int) -> int:
        """Return the age in ``current_year``, never less than zero."""
        if current_year <= self.birth_year:
            return 0
        return current_year - self.birth_year

    def person_info(self) -> str:
        """Return all personal fields as one comma separated line."""
        return ",".join(
            (
                self.person_id,
                self.full_name,
                str(self.birth_year),
                self.address,
                self.phone,
                self.email,
            )
        )

    @abstractmethod
    def info_line(self) -> str:
        """Return the record line that describes this member."""

    def display_info(self, output: TextIO) -> None:
        """Write the record line, with a line break, to ``output``."""
        output.write(self.info_line() + "\n")

    @abstractmethod
    def receive_email(self, message: str) -> None:
        """Deliver ``message`` to this member."""


class Professor(Person):
    """A member of the teaching staff."""

    KIND = "Καθηγητής"

    def __init__(
        self,
        prof_id: str,
        person_id: str,
        full_name: str,
        email: str,
        specialty: str,
        birth_year: int = 0,
        address: str = "",
        phone: str = "",
    ) -> None:
        super().__init__(person_id, full_name, email, birth_year, address, phone)
        self.prof_id = prof_id
        self.specialty = specialty

    def info_line(self) -> str:
        return ",".join(
            (
                self.KIND,
                self.person_id,
                self.full_name,
                self.email,
                self.prof_id,
                self.specialty,
            )
        )

    def receive_email(self, message: str) -> None:
        print(
            f"Ο καθηγητής {self.full_name} [ {self.email} ] "
            f"έλαβε το μύνημα: {message}"
        )