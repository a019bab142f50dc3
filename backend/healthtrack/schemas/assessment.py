import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from healthtrack.schemas.enums import AssessmentType, SeverityBand
from healthtrack.services.clinical_scoring import is_scored, question_ids, score_questionnaire
from healthtrack.services.scoring_config import get_scoring_config


class AssessmentCreate(BaseModel):
    """Questionnaire answers as submitted by the patient."""
    model_config = ConfigDict(frozen=True)

    type: AssessmentType
    date: dt.date = Field(default_factory=dt.date.today)
    raw_scores: dict[str, int] = Field(
        default_factory=dict,
        description="Question id (q1..qN) to item score",
    )

    @model_validator(mode="after")
    def check_responses(self) -> "AssessmentCreate":
        if not is_scored(self.type):
            return self

        expected = question_ids(self.type)
        missing = [q for q in expected if q not in self.raw_scores]
        if missing:
            raise ValueError(f"Missing responses: {', '.join(missing)}")

        unknown = sorted(set(self.raw_scores) - set(expected))
        if unknown:
            raise ValueError(f"Unknown questions for {self.type.value}: {', '.join(unknown)}")

        cfg = get_scoring_config().questionnaire
        out_of_range = [
            q for q, value in self.raw_scores.items()
            if not cfg.item_min <= value <= cfg.item_max
        ]
        if out_of_range:
            raise ValueError(
                f"Responses must be between {cfg.item_min} and {cfg.item_max}: {', '.join(out_of_range)}"
            )
        return self


class AssessmentRecord(BaseModel):
    """A stored assessment as consumed by the risk engine."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    type: AssessmentType
    date: dt.date
    raw_scores: dict[str, int] = Field(default_factory=dict)
    total_score: int | None = None

    @model_validator(mode="before")
    @classmethod
    def fill_total(cls, data: Any) -> Any:
        # Scored questionnaires without an explicit total get the item sum
        if isinstance(data, dict) and data.get("total_score") is None:
            assessment_type = data.get("type")
            if assessment_type is not None and is_scored(AssessmentType(assessment_type)):
                data = {**data, "total_score": score_questionnaire(data.get("raw_scores") or {})}
        return data

    @model_validator(mode="after")
    def check_total(self) -> "AssessmentRecord":
        if is_scored(self.type) and self.total_score != score_questionnaire(self.raw_scores):
            raise ValueError(
                f"total_score {self.total_score} does not match the sum of raw scores"
            )
        return self


class AssessmentResponse(BaseModel):
    id: int
    patient_id: str
    type: AssessmentType
    date: dt.date
    raw_scores: dict[str, int]
    total_score: int | None
    interpretation: SeverityBand | None = None
    created_at: dt.datetime

    class Config:
        from_attributes = True


class AssessmentListResponse(BaseModel):
    assessments: list[AssessmentResponse]
    total: int
