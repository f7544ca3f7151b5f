"""Aggregate domain model owning candidates, positions and interviews.

Invariants:
    - no two stored entities of a kind are the same under their weak identity
    - every interview's position and candidates are stored in this model
    - a position or candidate referenced by an interview cannot be removed

Edits to a candidate or position are propagated to the entities holding it so
references keep pointing at the stored instance.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import Candidate, Interview, InterviewStatus, Position
from .unique_list import FilteredList, Predicate, UniqueList

logger = logging.getLogger(__name__)


class HrManager:
    """Sole owner of all candidates, positions and interviews."""

    def __init__(self) -> None:
        self.candidates: UniqueList[Candidate] = UniqueList(
            Candidate.is_same_candidate, "candidate"
        )
        self.positions: UniqueList[Position] = UniqueList(
            Position.is_same_position, "position"
        )
        self.interviews: UniqueList[Interview] = UniqueList(
            Interview.is_same_interview, "interview"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HrManager):
            return NotImplemented
        return (
            self.candidates == other.candidates
            and self.positions == other.positions
            and self.interviews == other.interviews
        )

    def __repr__(self) -> str:
        return (
            f"HrManager({len(self.candidates)} candidates, "
            f"{len(self.positions)} positions, {len(self.interviews)} interviews)"
        )

    def reset_data(
        self,
        candidates: Iterable[Candidate] = (),
        positions: Iterable[Position] = (),
        interviews: Iterable[Interview] = (),
    ) -> None:
        """Replace all three collections, e.g. with freshly loaded data."""
        self.positions.set_all(positions)
        self.candidates.set_all(candidates)
        self.interviews.set_all(interviews)

    # --- filtered views ---------------------------------------------------

    @property
    def filtered_candidates(self) -> FilteredList[Candidate]:
        return self.candidates.filtered

    @property
    def filtered_positions(self) -> FilteredList[Position]:
        return self.positions.filtered

    @property
    def filtered_interviews(self) -> FilteredList[Interview]:
        return self.interviews.filtered

    def update_filtered_candidates(self, predicate: Predicate | None) -> None:
        self.candidates.update_filter(predicate)

    def update_filtered_positions(self, predicate: Predicate | None) -> None:
        self.positions.update_filter(predicate)

    def update_filtered_interviews(self, predicate: Predicate | None) -> None:
        self.interviews.update_filter(predicate)

    # --- positions ----------------------------------------------------------

    def has_position(self, position: Position) -> bool:
        return self.positions.contains(position)

    def find_position(self, title: str) -> Position | None:
        title = title.strip().lower()
        return self.positions.find(lambda p: p.title.lower() == title)

    def add_position(self, position: Position) -> None:
        self.positions.add(position)

    def is_position_scheduled(self, position: Position) -> bool:
        return any(i.position.is_same_position(position) for i in self.interviews)

    def set_position(self, target: Position, edited: Position) -> None:
        """Replace ``target`` and update every candidate and interview using it."""
        self.positions.set_entity(target, edited)
        replaced = {}
        for candidate in self.candidates.as_list():
            if candidate.has_applied_for(target):
                replaced[candidate] = candidate.with_position_replaced(target, edited)
                self.candidates.set_entity(candidate, replaced[candidate])
        self._propagate(replaced, target, edited)

    def remove_position(self, position: Position) -> None:
        """Remove an unscheduled position and withdraw it from candidates."""
        self.positions.remove(position)
        replaced = {}
        for candidate in self.candidates.as_list():
            if candidate.has_applied_for(position):
                replaced[candidate] = candidate.without_position(position)
                self.candidates.set_entity(candidate, replaced[candidate])
        self._propagate(replaced)
        logger.debug("Removed position %s", position.title)

    def _propagate(
        self,
        replaced: dict[Candidate, Candidate],
        target: Position | None = None,
        edited: Position | None = None,
    ) -> None:
        """Point interviews at replacement candidates and positions."""
        for interview in self.interviews.as_list():
            moves_position = target is not None and interview.position.is_same_position(target)
            if not moves_position and not any(c in replaced for c in interview.candidates):
                continue
            attendees = {replaced.get(c, c) for c in interview.candidates}
            self.interviews.set_entity(
                interview,
                interview.copy_with(
                    position=edited if moves_position else None,
                    candidates=attendees,
                ),
            )

    # --- candidates -------------------------------------------------------

    def has_candidate(self, candidate: Candidate) -> bool:
        return self.candidates.contains(candidate)

    def find_candidate(self, name: str) -> Candidate | None:
        name = name.strip().lower()
        return self.candidates.find(lambda c: c.name.lower() == name)

    def add_candidate(self, candidate: Candidate) -> None:
        self.candidates.add(candidate)

    def is_candidate_scheduled(self, candidate: Candidate) -> bool:
        return any(i.has_candidate(candidate) for i in self.interviews)

    def set_candidate(self, target: Candidate, edited: Candidate) -> None:
        """Replace ``target`` and update every interview it attends."""
        self.candidates.set_entity(target, edited)
        self._propagate({target: edited})

    def remove_candidate(self, candidate: Candidate) -> None:
        self.candidates.remove(candidate)

    # --- interviews -------------------------------------------------------

    def has_interview(self, interview: Interview) -> bool:
        return self.interviews.contains(interview)

    def add_interview(self, interview: Interview) -> None:
        self.interviews.add(interview)

    def remove_interview(self, interview: Interview) -> None:
        self.interviews.remove(interview)

    def set_interview_status(self, interview: Interview, status: InterviewStatus) -> None:
        """Change status in place; weak identity is unaffected."""
        interview.status = status
        self.interviews.notify_changed()

    def add_interview_candidates(
        self, interview: Interview, candidates: Iterable[Candidate]
    ) -> None:
        interview.add_candidates(candidates)
        self.interviews.notify_changed()
