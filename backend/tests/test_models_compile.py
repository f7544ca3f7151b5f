"""Smoke tests for domain models and schemas."""

from datetime import date, time, timedelta
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))
from hrmanager.domain import models, schemas  # noqa: E402


def test_models_and_schemas_compile() -> None:
    """Instantiate domain models and pydantic schemas."""

    position = models.Position(title="HR Manager")
    candidate = models.Candidate(
        name="Carol",
        phone="98765432",
        email="c@mail.com",
        address="1 Road",
        positions=frozenset({position}),
    )
    interview = models.Interview(
        position=position,
        candidates={candidate},
        date=date(2024, 1, 1),
        start_time=time(9, 0),
        duration=timedelta(minutes=45),
    )

    schema_position = schemas.JsonAdaptedPosition.from_model(position)
    schema_candidate = schemas.JsonAdaptedCandidate.from_model(candidate)
    schema_interview = schemas.JsonAdaptedInterview.from_model(interview)
    documents = [
        schemas.PositionsDocument(positions=[schema_position]),
        schemas.CandidatesDocument(candidates=[schema_candidate]),
        schemas.InterviewsDocument(interviews=[schema_interview]),
    ]

    assert schema_candidate.positions == ["HR Manager"]
    assert schema_interview.duration == 45
    assert schema_interview.status == "PENDING"
    for model in (schemas.JsonAdaptedPosition, schemas.JsonAdaptedCandidate,
                  schemas.JsonAdaptedInterview):
        assert "example" in model.model_json_schema()
    assert all([position, candidate, interview, *documents])
