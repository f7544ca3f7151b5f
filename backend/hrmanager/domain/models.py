"""Core domain entities.

Candidates and positions are immutable dataclasses; an edit produces a new
instance that the model swaps in. Interviews keep their position, date, start
time and duration fixed but may change status and gain candidates in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, time, timedelta
from enum import Enum
from typing import AbstractSet, FrozenSet, Iterable

POSITION_STATUS_CONSTRAINTS = "Position status can only take the values:\nopen\nfilled"
INTERVIEW_STATUS_CONSTRAINTS = (
    "Interview status can only take the values:\npending\ncompleted"
)


class PositionStatus(str, Enum):
    """Whether a position is still being recruited for."""

    OPEN = "OPEN"
    FILLED = "FILLED"

    @classmethod
    def parse(cls, value: str | None) -> "PositionStatus":
        """Parse a status string, treating missing or empty as ``OPEN``."""
        value = (value or "").strip().upper()
        if not value:
            return cls.OPEN
        if value not in ("OPEN", "FILLED"):
            raise ValueError(POSITION_STATUS_CONSTRAINTS)
        return cls(value)


class InterviewStatus(str, Enum):
    """Interview progress, ``PENDING`` until marked otherwise."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, value: str | None) -> "InterviewStatus":
        """Parse a status string, treating missing or empty as ``PENDING``."""
        value = (value or "").strip().upper()
        if not value:
            return cls.PENDING
        if value not in ("PENDING", "COMPLETED"):
            raise ValueError(INTERVIEW_STATUS_CONSTRAINTS)
        return cls(value)


@dataclass(frozen=True)
class Position:
    """Job position that candidates apply for.

    Example:
        >>> Position(title="HR Manager")
    """

    title: str
    status: PositionStatus = PositionStatus.OPEN

    def is_same_position(self, other: Position | None) -> bool:
        """Weak identity: titles match ignoring case."""
        if other is self:
            return True
        return other is not None and other.title.lower() == self.title.lower()

    def __str__(self) -> str:
        return f"{self.title} ({self.status.value})"


@dataclass(frozen=True)
class Candidate:
    """Person applying for one or more positions.

    Example:
        >>> Candidate(
        ...     name="Amy Bee",
        ...     phone="11111111",
        ...     email="amy@x.com",
        ...     address="123 Street",
        ...     positions=frozenset({Position(title="HR Manager")}),
        ... )
    """

    name: str
    phone: str
    email: str
    address: str
    tags: FrozenSet[str] = frozenset()
    remark: str = ""
    positions: FrozenSet[Position] = frozenset()

    def is_same_candidate(self, other: Candidate | None) -> bool:
        """Weak identity: names match ignoring case."""
        if other is self:
            return True
        return other is not None and other.name.lower() == self.name.lower()

    def has_applied_for(self, position: Position) -> bool:
        return any(p.is_same_position(position) for p in self.positions)

    def with_position_replaced(self, target: Position, edited: Position) -> Candidate:
        positions = frozenset(
            edited if p.is_same_position(target) else p for p in self.positions
        )
        return replace(self, positions=positions)

    def without_position(self, position: Position) -> Candidate:
        positions = frozenset(
            p for p in self.positions if not p.is_same_position(position)
        )
        return replace(self, positions=positions)

    def __str__(self) -> str:
        parts = [
            self.name,
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
        ]
        if self.remark:
            parts.append(f"Remark: {self.remark}")
        if self.positions:
            titles = ", ".join(sorted(p.title for p in self.positions))
            parts.append(f"Positions: {titles}")
        if self.tags:
            parts.append("Tags: " + "".join(f"[{t}]" for t in sorted(self.tags)))
        return "; ".join(parts)


@dataclass
class Interview:
    """Interview for a position attended by one or more candidates.

    Example:
        >>> Interview(
        ...     position=Position(title="HR Manager"),
        ...     candidates={amy},
        ...     date=date(2025, 1, 1),
        ...     start_time=time(9, 0),
        ...     duration=timedelta(minutes=60),
        ... )
    """

    position: Position
    candidates: set[Candidate]
    date: date
    start_time: time
    duration: timedelta
    status: InterviewStatus = field(default=InterviewStatus.PENDING)

    def __post_init__(self) -> None:
        if not self.candidates:
            raise ValueError("An interview needs at least one candidate.")
        self.candidates = set(self.candidates)
        if self.status is None:
            self.status = InterviewStatus.PENDING

    @property
    def position_title(self) -> str:
        return self.position.title

    @property
    def end_time(self) -> time:
        start = timedelta(hours=self.start_time.hour, minutes=self.start_time.minute)
        end = (start + self.duration).total_seconds() // 60
        return time(int(end // 60) % 24, int(end % 60))

    def is_same_interview(self, other: Interview | None) -> bool:
        """Weak identity: everything but status.

        Completing an interview never makes it look like a duplicate of its
        pending self.
        """
        if other is self:
            return True
        return (
            other is not None
            and other.position_title.lower() == self.position_title.lower()
            and other.candidates == self.candidates
            and other.date == self.date
            and other.start_time == self.start_time
            and other.duration == self.duration
        )

    def has_candidate(self, candidate: Candidate) -> bool:
        return any(c.is_same_candidate(candidate) for c in self.candidates)

    def add_candidates(self, candidates: Iterable[Candidate]) -> None:
        """Merge ``candidates`` into the attendee set."""
        self.candidates |= set(candidates)

    def copy_with(
        self,
        *,
        position: Position | None = None,
        candidates: AbstractSet[Candidate] | None = None,
        status: InterviewStatus | None = None,
    ) -> Interview:
        return Interview(
            position=position if position is not None else self.position,
            candidates=set(candidates if candidates is not None else self.candidates),
            date=self.date,
            start_time=self.start_time,
            duration=self.duration,
            status=status if status is not None else self.status,
        )

    def __str__(self) -> str:
        names = ", ".join(sorted(c.name for c in self.candidates))
        return (
            f"[{self.position_title}] {names}; "
            f"{self.date.strftime('%d/%m/%Y')} "
            f"{self.start_time.strftime('%H%M')}-{self.end_time.strftime('%H%M')}; "
            f"{self.status.value}"
        )
