"""A small roster of people and their jobs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class Job(Enum):
    DOCTOR = "Doctor"
    FIRE_FIGHTER = "FireFighter"
    LAWYER = "Lawyer"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Person:
    name: str
    job: Job | None = None

    @property
    def employed(self) -> bool:
        return self.job is not None


def default_people() -> list[Person]:
    """The starting roster."""
    return [
        Person("Alex", Job.DOCTOR),
        Person("Bob"),
        Person("Charlie", Job.FIRE_FIGHTER),
        Person("DAVID", Job.LAWYER),
        Person("Ellen", Job.FIRE_FIGHTER),
    ]


def _emit(lines: list[str]) -> list[str]:
    for line in lines:
        print(line)
    return lines


def print_names(people: Iterable[Person]) -> list[str]:
    """Print every name; return the printed lines."""
    return _emit([f"Name: {person.name}" for person in people])


def people_with_jobs(people: Iterable[Person]) -> list[str]:
    """Print everyone who is employed; return the printed lines."""
    return _emit([f"{person.name} has a job." for person in people if person.employed])


def people_ready_for_hire(people: Iterable[Person]) -> list[str]:
    """Print everyone without a job; return the printed lines."""
    return _emit(
        [f"{person.name} is ready for hire." for person in people if not person.employed]
    )


def person_does_job(people: Iterable[Person]) -> list[str]:
    """Print each employed person's job; return the printed lines."""
    return _emit(
        [f"{person.name} is a {person.job}" for person in people if person.job is not None]
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List people and their jobs.")
    parser.parse_args(argv)
    people = default_people()
    print_names(people)
    people_with_jobs(people)
    people_ready_for_hire(people)
    person_does_job(people)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())