"""Scoring engine: heuristic survival probability for a feature set.

The score mirrors the historical survival patterns the ensemble model
learned (women and children first, class and cabin access, family size)
as a set of additive adjustments to a 50% base rate.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from ..core.config import BASE_RATE, PROBABILITY_CEILING, PROBABILITY_FLOOR
from .features import AgeGroup, FareGroup, FeatureSet, Sex, SexClass, Title
from .noise import NoiseSource


@dataclass(frozen=True)
class ScoreAdjustment:
    factor: str
    delta: float


def score_breakdown(features: FeatureSet) -> List[ScoreAdjustment]:
    """
    Adjustments applied to the base rate, in evaluation order.

    Args:
        features: Derived passenger features

    Returns:
        Non-zero adjustments; their sum plus the base rate is the raw score
    """
    adjustments: List[ScoreAdjustment] = []

    # Gender (strongest predictor)
    if features.sex is Sex.FEMALE:
        adjustments.append(ScoreAdjustment("sex_female", 0.4))
    else:
        adjustments.append(ScoreAdjustment("sex_male", -0.3))

    if features.pclass == 1:
        adjustments.append(ScoreAdjustment("first_class", 0.2))
    elif features.pclass == 3:
        adjustments.append(ScoreAdjustment("third_class", -0.15))

    if features.is_child == 1:
        adjustments.append(ScoreAdjustment("child", 0.15))
    elif features.age_group is AgeGroup.SENIOR:
        adjustments.append(ScoreAdjustment("senior", -0.1))

    # Large families were hard to keep together in the boats
    if features.is_alone == 1:
        adjustments.append(ScoreAdjustment("alone", -0.05))
    elif features.family_size > 4:
        adjustments.append(ScoreAdjustment("large_family", -0.1))

    if features.has_cabin == 1:
        adjustments.append(ScoreAdjustment("cabin", 0.1))

    # Fare as a socioeconomic proxy
    if features.fare_group is FareGroup.VERYHIGH:
        adjustments.append(ScoreAdjustment("fare_veryhigh", 0.05))
    elif features.fare_group is FareGroup.LOW:
        adjustments.append(ScoreAdjustment("fare_low", -0.05))

    if features.title is Title.MASTER:
        adjustments.append(ScoreAdjustment("title_master", 0.1))
    elif features.title is Title.MRS:
        adjustments.append(ScoreAdjustment("title_mrs", 0.05))

    if features.sex_pclass is SexClass.FEMALE_1:
        adjustments.append(ScoreAdjustment("female_first_class", 0.1))
    elif features.sex_pclass is SexClass.MALE_3:
        adjustments.append(ScoreAdjustment("male_third_class", -0.15))

    return adjustments


def heuristic_score(features: FeatureSet) -> float:
    """Base rate plus all adjustments, clamped to [0, 1], before noise."""
    score = BASE_RATE
    for adjustment in score_breakdown(features):
        score += adjustment.delta
    return float(np.clip(score, 0.0, 1.0))


def calculate_survival_probability(features: FeatureSet, noise: NoiseSource) -> float:
    """
    Survival probability for a feature set.

    Draws exactly one value from `noise`, so results vary between calls
    unless a fixed source is injected.

    Args:
        features: Derived passenger features
        noise: Source of the random perturbation

    Returns:
        Probability in [0.05, 0.95]
    """
    score = heuristic_score(features) + noise.draw()
    return float(np.clip(score, PROBABILITY_FLOOR, PROBABILITY_CEILING))
