"""
Clinical Scoring Engine - PHQ-9 and GAD-7 questionnaires.

Totals are the plain sum of item responses; severity bands are half-open
intervals whose lower bound belongs to the band (a PHQ-9 of 5 is "Leve").
"""
from collections.abc import Mapping
from typing import Optional

from healthtrack.schemas.enums import SCORED_ASSESSMENTS, AssessmentType, SeverityBand
from healthtrack.services.scoring_config import QuestionnaireConfig, get_scoring_config

PHQ9_QUESTIONS: tuple[str, ...] = (
    "Pouco interesse ou prazer em fazer as coisas",
    "Sentindo-se para baixo, deprimido(a) ou sem esperança",
    "Problemas para adormecer, continuar dormindo ou dormir demais",
    "Sentindo-se cansado(a) ou com pouca energia",
    "Falta de apetite ou comendo demais",
    "Sentindo-se mal consigo mesmo(a) ou que é um fracasso",
    "Problemas de concentração",
    "Movendo-se ou falando tão devagar que outras pessoas notaram",
    "Pensamentos de que seria melhor estar morto(a) ou de se ferir",
)

GAD7_QUESTIONS: tuple[str, ...] = (
    "Sentindo-se nervoso(a), ansioso(a) ou muito tenso(a)",
    "Não sendo capaz de impedir ou controlar as preocupações",
    "Preocupando-se muito com diversas coisas",
    "Dificuldade para relaxar",
    "Tão inquieto(a) que fica difícil permanecer sentado(a)",
    "Ficando facilmente irritado(a) ou chateado(a)",
    "Sentindo medo como se algo horrível fosse acontecer",
)

QUESTIONS: dict[AssessmentType, tuple[str, ...]] = {
    AssessmentType.PHQ9: PHQ9_QUESTIONS,
    AssessmentType.GAD7: GAD7_QUESTIONS,
}


def is_scored(assessment_type: AssessmentType) -> bool:
    return assessment_type in SCORED_ASSESSMENTS


def question_ids(assessment_type: AssessmentType) -> list[str]:
    """Response keys expected for a questionnaire: q1..qN."""
    questions = QUESTIONS.get(assessment_type, ())
    return [f"q{i}" for i in range(1, len(questions) + 1)]


def score_questionnaire(responses: Mapping[str, int]) -> int:
    """Sum of all item responses. Completeness is the caller's concern."""
    return sum(responses.values())


def interpret_phq9(score: int, config: Optional[QuestionnaireConfig] = None) -> SeverityBand:
    if config is None:
        config = get_scoring_config().questionnaire

    if score < config.phq9_mild:
        return SeverityBand.MINIMAL
    if score < config.phq9_moderate:
        return SeverityBand.MILD
    if score < config.phq9_moderately_severe:
        return SeverityBand.MODERATE
    if score < config.phq9_severe:
        return SeverityBand.MODERATELY_SEVERE
    return SeverityBand.SEVERE


def interpret_gad7(score: int, config: Optional[QuestionnaireConfig] = None) -> SeverityBand:
    if config is None:
        config = get_scoring_config().questionnaire

    if score < config.gad7_mild:
        return SeverityBand.MINIMAL
    if score < config.gad7_moderate:
        return SeverityBand.MILD
    if score < config.gad7_severe:
        return SeverityBand.MODERATE
    return SeverityBand.SEVERE


def interpret(
    assessment_type: AssessmentType,
    score: Optional[int],
    config: Optional[QuestionnaireConfig] = None,
) -> Optional[SeverityBand]:
    """Severity band for any questionnaire; None when it has no scoring rule."""
    if score is None:
        return None
    if assessment_type == AssessmentType.PHQ9:
        return interpret_phq9(score, config)
    if assessment_type == AssessmentType.GAD7:
        return interpret_gad7(score, config)
    return None
