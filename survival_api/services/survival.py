"""
Survival analysis service.

The one entry point callers use: validates passenger details, runs the
scoring and what-if engine, and packages the result. Failures inside the
engine are logged and surfaced as a single generic error.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..core.config import (
    HIGH_OUTLOOK_THRESHOLD,
    LOW_OUTLOOK_THRESHOLD,
    MODEL_ACCURACY,
    get_settings,
)
from ..core.errors import (
    AnalysisFailedError,
    InvalidFieldError,
    MissingFieldError,
    PassengerValidationError,
)
from ..core.logging import get_logger
from ..ml.engine import calculate_survival_probability
from ..ml.features import Embarked, PassengerInput, Sex, derive_features, parse_int
from ..ml.noise import NoiseSource, UniformNoise
from ..optimization.what_if import FactorSuggestion, analyze_what_if

logger = get_logger(__name__)

REQUIRED_FIELDS = ["name", "pclass", "sex", "age", "sibsp", "parch", "fare", "embarked"]
PASSENGER_CLASSES = (1, 2, 3)


@dataclass(frozen=True)
class AnalysisResult:
    base_probability: float
    model_accuracy: float
    factor_analysis: Tuple[FactorSuggestion, ...]


@dataclass(frozen=True)
class PredictionResult:
    survival_probability: float


@dataclass(frozen=True)
class SurvivalOutlook:
    level: str
    label: str


class SimulatedLatency:
    """
    Artificial delay awaited before computing, mimicking a remote model call.

    The delay is `minimum` plus a uniform random share of `jitter` seconds.
    Cancelling the awaiting task cancels the delay.
    """

    def __init__(self, minimum: float = 0.0, jitter: float = 0.0):
        self.minimum = minimum
        self.jitter = jitter

    @classmethod
    def from_settings(cls) -> "SimulatedLatency":
        settings = get_settings()
        return cls(settings.latency_min_seconds, settings.latency_jitter_seconds)

    def seconds(self) -> float:
        return self.minimum + float(np.random.default_rng().uniform(0.0, self.jitter))

    async def wait(self) -> None:
        delay = self.seconds()
        if delay > 0:
            await asyncio.sleep(delay)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_passenger(passenger: PassengerInput) -> None:
    """
    Reject passenger details the engine cannot score.

    Raises:
        MissingFieldError: a mandatory field is absent or blank
        InvalidFieldError: sex, embarkation port or class is outside its choices
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(passenger, name))]
    if missing:
        raise MissingFieldError(missing)

    sexes = [member.value for member in Sex]
    if passenger.sex not in sexes:
        raise InvalidFieldError("sex", passenger.sex, sexes)

    ports = [member.value for member in Embarked]
    if passenger.embarked not in ports:
        raise InvalidFieldError("embarked", passenger.embarked, ports)

    if parse_int(passenger.pclass) not in PASSENGER_CLASSES:
        raise InvalidFieldError("pclass", passenger.pclass, [str(c) for c in PASSENGER_CLASSES])


def survival_outlook(probability: float) -> SurvivalOutlook:
    """Qualitative band for a base probability."""
    if probability > HIGH_OUTLOOK_THRESHOLD:
        return SurvivalOutlook("high", "High Survival Probability")
    if probability >= LOW_OUTLOOK_THRESHOLD:
        return SurvivalOutlook("moderate", "Moderate Survival Probability")
    return SurvivalOutlook("low", "Low Survival Probability")


def _default_noise() -> NoiseSource:
    return UniformNoise(seed=get_settings().noise_seed)


async def predict_survival(
    passenger: PassengerInput,
    *,
    noise: Optional[NoiseSource] = None,
    latency: Optional[SimulatedLatency] = None,
) -> PredictionResult:
    """
    Survival probability for a passenger, without what-if analysis.

    Raises:
        PassengerValidationError: the passenger details were rejected
        AnalysisFailedError: scoring failed unexpectedly
    """
    try:
        validate_passenger(passenger)
    except PassengerValidationError as e:
        logger.info("passenger_validation_failed", reason=e.message)
        raise

    await (latency or SimulatedLatency.from_settings()).wait()

    try:
        features = derive_features(passenger)
        probability = calculate_survival_probability(features, noise or _default_noise())
    except Exception as e:
        logger.error("survival_prediction_failed", error=str(e), exc_info=True)
        raise AnalysisFailedError("Failed to calculate survival probability") from e

    logger.info("survival_prediction_completed", probability=round(probability, 4))
    return PredictionResult(survival_probability=probability)


async def analyze_survival(
    passenger: PassengerInput,
    *,
    noise: Optional[NoiseSource] = None,
    latency: Optional[SimulatedLatency] = None,
) -> AnalysisResult:
    """
    Base survival probability plus the what-if suggestions for a passenger.

    Args:
        passenger: Passenger details as submitted
        noise: Perturbation source; a fresh uniform source per call by default
        latency: Delay awaited before computing; taken from settings by default

    Returns:
        Immutable analysis result

    Raises:
        PassengerValidationError: the passenger details were rejected
        AnalysisFailedError: derivation or scoring failed unexpectedly
    """
    try:
        validate_passenger(passenger)
    except PassengerValidationError as e:
        logger.info("passenger_validation_failed", reason=e.message)
        raise

    await (latency or SimulatedLatency.from_settings()).wait()

    logger.debug("survival_analysis_started", pclass=passenger.pclass, sex=passenger.sex)
    try:
        base_probability, suggestions = analyze_what_if(passenger, noise or _default_noise())
    except Exception as e:
        logger.error("survival_analysis_failed", error=str(e), exc_info=True)
        raise AnalysisFailedError("Failed to analyze survival factors") from e

    factors = [s.factor for s in suggestions]
    logger.info(
        "survival_analysis_completed",
        base_probability=round(base_probability, 4),
        factors=factors,
    )
    return AnalysisResult(
        base_probability=base_probability,
        model_accuracy=MODEL_ACCURACY,
        factor_analysis=tuple(suggestions),
    )
