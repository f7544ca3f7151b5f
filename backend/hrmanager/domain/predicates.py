"""Keyword predicates installed on filtered views by the find commands.

A keyword matches when it is a case-insensitive substring of the searched
text; an entity matches when any keyword does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import Candidate, Interview, Position


def _matches(keywords: Iterable[str], texts: Iterable[str]) -> bool:
    texts = [t.lower() for t in texts]
    return any(k.lower() in t for k in keywords for t in texts)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    keywords: Tuple[str, ...]

    def __call__(self, candidate: Candidate) -> bool:
        return _matches(self.keywords, [candidate.name])


@dataclass(frozen=True)
class TitleContainsKeywordsPredicate:
    keywords: Tuple[str, ...]

    def __call__(self, position: Position) -> bool:
        return _matches(self.keywords, [position.title])


@dataclass(frozen=True)
class InterviewContainsKeywordsPredicate:
    """Matches on the position title or any attending candidate's name."""

    keywords: Tuple[str, ...]

    def __call__(self, interview: Interview) -> bool:
        texts = [interview.position_title, *(c.name for c in interview.candidates)]
        return _matches(self.keywords, texts)
