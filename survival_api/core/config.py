"""Service-wide configuration.

Defines the scoring constants, the title vocabulary and bracket edges used
by feature derivation, and the environment-driven runtime settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Honorifics recognised in passenger names (scan order does not matter,
# the leftmost occurrence in the name wins)
TITLE_VOCABULARY = [
    "Mr", "Mrs", "Miss", "Master", "Dr", "Rev", "Col", "Major", "Mlle",
    "Mme", "Ms", "Lady", "Sir", "Capt", "Countess", "Don", "Dona", "Jonkheer",
]

# Lower-cased honorific -> title group
TITLE_GROUPS = {
    "mlle": "miss",
    "ms": "miss",
    "mme": "mrs",
    "lady": "mrs",
    "countess": "mrs",
    "dona": "mrs",
    "capt": "rare",
    "col": "rare",
    "major": "rare",
    "dr": "rare",
    "rev": "rare",
    "sir": "rare",
    "don": "rare",
    "jonkheer": "rare",
}
DEFAULT_TITLE = "mr"

# Age groups: upper bounds are exclusive
CHILD_AGE = 16.0
AGE_BINS = [(16.0, "child"), (30.0, "adult"), (60.0, "middleage")]

# Fare groups: upper bounds are inclusive
FARE_BINS = [(7.91, "low"), (14.454, "medium"), (31.0, "high")]

BASE_RATE = 0.5
NOISE_AMPLITUDE = 0.05
PROBABILITY_FLOOR = 0.05
PROBABILITY_CEILING = 0.95

# Minimum gain before a what-if change is reported
IMPACT_THRESHOLD = 0.05

# Validation accuracy of the stacking ensemble the heuristic stands in for
MODEL_ACCURACY = 0.8324
MODEL_NAME = "Titanic Stacking Ensemble v1.0.0"
MODEL_COMPONENTS = [
    "Random Forest Classifier",
    "Gradient Boosting Classifier",
    "XGBoost Classifier",
    "Logistic Regression",
]

HIGH_OUTLOOK_THRESHOLD = 0.75
LOW_OUTLOOK_THRESHOLD = 0.35


class Settings(BaseSettings):
    """Runtime settings loaded from `SURVIVAL_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SURVIVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Artificial delay before each analysis (mimics a remote inference call)
    latency_min_seconds: float = Field(default=0.0, ge=0.0, description="Fixed part of the simulated delay")
    latency_jitter_seconds: float = Field(default=0.0, ge=0.0, description="Random extra delay on top of the minimum")

    noise_seed: Optional[int] = Field(default=None, description="Seed for the score noise generator")

    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="console", description="Log format (json|console)")

    cors_origins: str = Field(default="*", description="CORS allowed origins (comma-separated)")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
