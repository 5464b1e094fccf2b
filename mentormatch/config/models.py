"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class AnonymousStrategy(str, Enum):
    """Shuffle algorithm used when there is no viewer profile."""

    WEIGHTED = "weighted"
    FISHER_YATES = "fisher-yates"


class RankingConfig(BaseModel):
    """Scoring and weighting constants for the ordering engine.

    Axis weights and tier thresholds are coupled: with the defaults a single
    axis match scores 50 and lands in the high tier. Changing one without the
    other silently changes ranking behavior (see validators.check_for_warnings).
    """

    expertise_match_weight: int = Field(
        50, ge=0, description="Score added when the candidate's expertise meets the viewer's interest"
    )
    interest_match_weight: int = Field(
        50, ge=0, description="Score added when the candidate's interest meets the viewer's expertise"
    )
    high_match_threshold: int = Field(
        50, ge=0, description="Minimum score for the high weight tier (inclusive)"
    )
    medium_match_threshold: int = Field(
        25, ge=0, description="Minimum score for the medium weight tier (inclusive)"
    )
    high_weight: int = Field(3, ge=1, description="Shuffle weight for high-tier candidates")
    medium_weight: int = Field(2, ge=1, description="Shuffle weight for medium-tier candidates")
    base_weight: int = Field(1, ge=1, description="Shuffle weight for everyone else")
    good_match_threshold: int = Field(
        50, ge=0, description="Minimum score to flag a candidate as a good match"
    )
    fallback_seed: str = Field(
        "anonymous", description="Seed material used when there is no viewer email"
    )
    anonymous_strategy: AnonymousStrategy = Field(
        AnonymousStrategy.WEIGHTED,
        description="Shuffle used without a viewer (weighted with uniform weights, or fisher-yates)",
    )

    model_config = {"use_enum_values": True, "validate_default": True}

    @field_validator("fallback_seed")
    @classmethod
    def fallback_seed_not_blank(cls, v: str) -> str:
        """Reject an empty fallback seed."""
        if not v.strip():
            raise ValueError("fallback_seed cannot be empty or whitespace-only")
        return v

    @model_validator(mode="after")
    def validate_tiers(self):
        """Validate that tiers are ordered."""
        if self.medium_match_threshold >= self.high_match_threshold:
            raise ValueError(
                f"medium_match_threshold ({self.medium_match_threshold}) must be lower than "
                f"high_match_threshold ({self.high_match_threshold})"
            )

        if not self.high_weight >= self.medium_weight >= self.base_weight:
            raise ValueError(
                "Tier weights must satisfy high_weight >= medium_weight >= base_weight, got "
                f"{self.high_weight}/{self.medium_weight}/{self.base_weight}"
            )

        return self

    @property
    def max_score(self) -> int:
        """Score of a candidate matching on both axes."""
        return self.expertise_match_weight + self.interest_match_weight


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for Mentor Match."""

    ranking: RankingConfig = Field(
        default_factory=RankingConfig, description="Scoring and weighting constants"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
