"""
Scoring Configuration - Weights and thresholds for every derived metric.

All "magic numbers" used by the physical, workload, questionnaire and
mental-health engines live here so they can be tuned without code changes.
"""
from dataclasses import dataclass, field
from typing import Optional

import yaml
from pathlib import Path


@dataclass
class ReadinessConfig:
    """Readiness index weights (must sum to 1.0)."""
    sleep_quality_weight: float = 0.25
    fatigue_weight: float = 0.20  # inverted
    stress_weight: float = 0.15  # inverted
    pain_weight: float = 0.15  # inverted
    mood_weight: float = 0.10
    readiness_to_train_weight: float = 0.15

    # Value used when a 0-10 input is missing
    default_value: float = 5.0
    scale_max: float = 10.0


@dataclass
class LoadConfig:
    """Training load (ACWR, monotony, strain) configuration."""
    # EWMA windows in days
    acute_window: int = 7
    chronic_window: int = 42

    # Injury window
    monotony_high: float = 2.0
    tsb_low: float = -10.0

    # ACWR zone bounds
    acwr_low: float = 0.8
    acwr_high: float = 1.3

    @property
    def alpha_acute(self) -> float:
        return 2 / (self.acute_window + 1)

    @property
    def alpha_chronic(self) -> float:
        return 2 / (self.chronic_window + 1)


@dataclass
class QuestionnaireConfig:
    """PHQ-9 / GAD-7 band cut points (lower bound of each band)."""
    phq9_mild: int = 5
    phq9_moderate: int = 10
    phq9_moderately_severe: int = 15
    phq9_severe: int = 20

    gad7_mild: int = 5
    gad7_moderate: int = 10
    gad7_severe: int = 15

    # Per-item answer range
    item_min: int = 0
    item_max: int = 3


@dataclass
class AlertConfig:
    """Mental-health alert thresholds."""
    # Suicide risk (inclusive lower bounds)
    suicide_medium: int = 3
    suicide_high: int = 5
    suicide_critical: int = 7

    # Mania: both must be exceeded
    mania_stress_app: int = 80
    mania_energy: int = 8

    depression_high: int = 7
    anxiety_high: int = 7


@dataclass
class RiskScoreConfig:
    """Patient risk score weights."""
    suicide_weight: int = 10
    depression_weight: int = 2
    anxiety_weight: int = 2

    min_score: int = 0
    max_score: int = 100


@dataclass
class ScoringConfig:
    """Master configuration for all derived-metric parameters."""
    readiness: ReadinessConfig = field(default_factory=ReadinessConfig)
    load: LoadConfig = field(default_factory=LoadConfig)
    questionnaire: QuestionnaireConfig = field(default_factory=QuestionnaireConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    risk: RiskScoreConfig = field(default_factory=RiskScoreConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ScoringConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        if "readiness" in data:
            config.readiness = ReadinessConfig(**data["readiness"])
        if "load" in data:
            config.load = LoadConfig(**data["load"])
        if "questionnaire" in data:
            config.questionnaire = QuestionnaireConfig(**data["questionnaire"])
        if "alerts" in data:
            config.alerts = AlertConfig(**data["alerts"])
        if "risk" in data:
            config.risk = RiskScoreConfig(**data["risk"])

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "readiness": self.readiness.__dict__,
            "load": self.load.__dict__,
            "questionnaire": self.questionnaire.__dict__,
            "alerts": self.alerts.__dict__,
            "risk": self.risk.__dict__,
        }


# Global default configuration instance
_default_config: Optional[ScoringConfig] = None


def get_scoring_config() -> ScoringConfig:
    """Get the current scoring configuration (singleton pattern)."""
    global _default_config
    if _default_config is None:
        _default_config = ScoringConfig()
    return _default_config


def set_scoring_config(config: ScoringConfig) -> None:
    """Set a custom scoring configuration."""
    global _default_config
    _default_config = config


def load_scoring_config_from_yaml(path: str | Path) -> ScoringConfig:
    """Load and set scoring configuration from YAML file."""
    config = ScoringConfig.from_yaml(path)
    set_scoring_config(config)
    return config
