"""JSON file storage for the HR manager.

Invariants:
    - each collection lives in its own file; a missing file is an empty collection
    - malformed JSON and OS faults raise StorageError
    - well-formed data with invalid values, dangling references or duplicates
      raises DataConversionError, and nothing is loaded
    - saves always write the full, unfiltered collections

Loading is two-phase: all documents are read and shape-checked first, then
positions, candidates and interviews are converted in that order, each against
lookups of the ones before it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import DataConversionError, DuplicateEntityError, StorageError
from ..domain.hr_manager import HrManager
from ..domain.schemas import (
    CandidatesDocument,
    InterviewsDocument,
    JsonAdaptedCandidate,
    JsonAdaptedInterview,
    JsonAdaptedPosition,
    PositionsDocument,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseModel)


def _read_document(path: Path, document_type: Type[D]) -> D:
    if not path.exists():
        logger.info("Data file %s not found, starting with an empty collection", path)
        return document_type()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StorageError(f"Could not read {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StorageError(f"{path} is not valid JSON: {exc}") from exc
    try:
        return document_type.model_validate(raw)
    except ValidationError as exc:
        raise DataConversionError(f"{path} has an unexpected shape: {exc}") from exc


def _write_document(path: Path, document: BaseModel) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Could not write {path}: {exc}") from exc


def document_to_hr_manager(
    candidates_doc: CandidatesDocument,
    positions_doc: PositionsDocument,
    interviews_doc: InterviewsDocument,
) -> HrManager:
    """Resolve the three documents into a populated ``HrManager``."""
    positions = [p.to_model() for p in positions_doc.positions]
    positions_by_title = _index(positions, lambda p: p.title, "position")

    candidates = [c.to_model(positions_by_title) for c in candidates_doc.candidates]
    candidates_by_name = _index(candidates, lambda c: c.name, "candidate")

    interviews = [
        i.to_model(positions_by_title, candidates_by_name)
        for i in interviews_doc.interviews
    ]

    hr_manager = HrManager()
    try:
        hr_manager.reset_data(candidates, positions, interviews)
    except DuplicateEntityError as exc:
        raise DataConversionError(exc.message) from exc
    return hr_manager


def _index(items, key, label: str) -> dict:
    lookup = {}
    for item in items:
        k = key(item).lower()
        if k in lookup:
            raise DataConversionError(f"Duplicate {label} {key(item)!r}")
        lookup[k] = item
    return lookup


class JsonHrManagerStorage:
    """Reads and writes the candidates, positions and interviews files."""

    def __init__(self, candidates_path: Path, positions_path: Path, interviews_path: Path):
        self.candidates_path = Path(candidates_path)
        self.positions_path = Path(positions_path)
        self.interviews_path = Path(interviews_path)

    def read_hr_manager(self) -> HrManager:
        """Load all three files.

        Raises:
            StorageError: a file could not be read or is not JSON.
            DataConversionError: a file holds invalid or unresolvable data.
        """
        candidates_doc = _read_document(self.candidates_path, CandidatesDocument)
        positions_doc = _read_document(self.positions_path, PositionsDocument)
        interviews_doc = _read_document(self.interviews_path, InterviewsDocument)
        hr_manager = document_to_hr_manager(candidates_doc, positions_doc, interviews_doc)
        logger.info("Loaded %r", hr_manager)
        return hr_manager

    def save_hr_manager(self, hr_manager: HrManager) -> None:
        """Write all three files.

        Raises:
            StorageError: a file could not be written.
        """
        _write_document(
            self.candidates_path,
            CandidatesDocument(
                candidates=[JsonAdaptedCandidate.from_model(c) for c in hr_manager.candidates]
            ),
        )
        _write_document(
            self.positions_path,
            PositionsDocument(
                positions=[JsonAdaptedPosition.from_model(p) for p in hr_manager.positions]
            ),
        )
        _write_document(
            self.interviews_path,
            InterviewsDocument(
                interviews=[JsonAdaptedInterview.from_model(i) for i in hr_manager.interviews]
            ),
        )
        logger.debug("Saved %r", hr_manager)
