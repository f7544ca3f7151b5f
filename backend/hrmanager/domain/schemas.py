"""Pydantic models describing the three persisted JSON documents.

These data transfer objects mirror the domain models but store references by
natural key: candidates list the titles of the positions they applied for and
interviews list a position title and candidate names. Converting back to
domain objects therefore needs lookups of already converted entities, and
raises ``DataConversionError`` when a value is invalid or a key dangles.
"""

from __future__ import annotations

from typing import List, Mapping

from pydantic import BaseModel, ConfigDict

from ..core.errors import DataConversionError
from . import fields
from .models import Candidate, Interview, InterviewStatus, Position, PositionStatus


def _convert(label: str, parse, value):
    try:
        return parse(value)
    except ValueError as exc:
        raise DataConversionError(f"Invalid {label} {value!r}: {exc}") from exc


class JsonAdaptedPosition(BaseModel):
    """Stored position.

    Example:
        >>> JsonAdaptedPosition(title="HR Manager", status="OPEN")
    """

    title: str
    status: str = PositionStatus.OPEN.value

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"title": "HR Manager", "status": "OPEN"}},
    )

    @classmethod
    def from_model(cls, position: Position) -> "JsonAdaptedPosition":
        return cls(title=position.title, status=position.status.value)

    def to_model(self) -> Position:
        return Position(
            title=_convert("position title", fields.parse_title, self.title),
            status=_convert("position status", PositionStatus.parse, self.status),
        )


class JsonAdaptedCandidate(BaseModel):
    """Stored candidate; ``positions`` holds position titles.

    Example:
        >>> JsonAdaptedCandidate(
        ...     name="Amy Bee",
        ...     phone="11111111",
        ...     email="amy@x.com",
        ...     address="123 Street",
        ...     positions=["HR Manager"],
        ... )
    """

    name: str
    phone: str
    email: str
    address: str
    remark: str = ""
    tags: List[str] = []
    positions: List[str] = []

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Amy Bee",
                "phone": "11111111",
                "email": "amy@x.com",
                "address": "123 Street",
                "remark": "",
                "tags": ["friends"],
                "positions": ["HR Manager"],
            }
        },
    )

    @classmethod
    def from_model(cls, candidate: Candidate) -> "JsonAdaptedCandidate":
        return cls(
            name=candidate.name,
            phone=candidate.phone,
            email=candidate.email,
            address=candidate.address,
            remark=candidate.remark,
            tags=sorted(candidate.tags),
            positions=sorted(p.title for p in candidate.positions),
        )

    def to_model(self, positions_by_title: Mapping[str, Position]) -> Candidate:
        positions = set()
        for title in self.positions:
            position = positions_by_title.get(title.strip().lower())
            if position is None:
                raise DataConversionError(
                    f"Candidate {self.name!r} refers to unknown position {title!r}"
                )
            positions.add(position)
        return Candidate(
            name=_convert("name", fields.parse_name, self.name),
            phone=_convert("phone", fields.parse_phone, self.phone),
            email=_convert("email", fields.parse_email, self.email),
            address=_convert("address", fields.parse_address, self.address),
            tags=frozenset(_convert("tag", fields.parse_tag, t) for t in self.tags),
            remark=fields.parse_remark(self.remark),
            positions=frozenset(positions),
        )


class JsonAdaptedInterview(BaseModel):
    """Stored interview referring to its position and candidates by key.

    Example:
        >>> JsonAdaptedInterview(
        ...     position_title="HR Manager",
        ...     candidate_names=["Amy Bee"],
        ...     date="01/01/2025",
        ...     start_time="0900",
        ...     duration=60,
        ... )
    """

    position_title: str
    candidate_names: List[str]
    date: str
    start_time: str
    duration: int
    status: str = ""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "position_title": "HR Manager",
                "candidate_names": ["Amy Bee"],
                "date": "01/01/2025",
                "start_time": "0900",
                "duration": 60,
                "status": "PENDING",
            }
        },
    )

    @classmethod
    def from_model(cls, interview: Interview) -> "JsonAdaptedInterview":
        return cls(
            position_title=interview.position_title,
            candidate_names=sorted(c.name for c in interview.candidates),
            date=fields.format_date(interview.date),
            start_time=fields.format_time(interview.start_time),
            duration=fields.duration_minutes(interview.duration),
            status=interview.status.value,
        )

    def to_model(
        self,
        positions_by_title: Mapping[str, Position],
        candidates_by_name: Mapping[str, Candidate],
    ) -> Interview:
        position = positions_by_title.get(self.position_title.strip().lower())
        if position is None:
            raise DataConversionError(
                f"Interview refers to unknown position {self.position_title!r}"
            )
        if not self.candidate_names:
            raise DataConversionError(
                f"Interview for {self.position_title!r} has no candidates"
            )
        candidates = set()
        for name in self.candidate_names:
            candidate = candidates_by_name.get(name.strip().lower())
            if candidate is None:
                raise DataConversionError(
                    f"Interview for {self.position_title!r} refers to unknown candidate {name!r}"
                )
            candidates.add(candidate)
        return Interview(
            position=position,
            candidates=candidates,
            date=_convert("date", fields.parse_date, self.date),
            start_time=_convert("start time", fields.parse_time, self.start_time),
            duration=_convert("duration", fields.parse_duration, self.duration),
            status=_convert("interview status", InterviewStatus.parse, self.status),
        )


class CandidatesDocument(BaseModel):
    candidates: List[JsonAdaptedCandidate] = []


class PositionsDocument(BaseModel):
    positions: List[JsonAdaptedPosition] = []


class InterviewsDocument(BaseModel):
    interviews: List[JsonAdaptedInterview] = []
