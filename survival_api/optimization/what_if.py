"""What-if analysis: which single change would most help a passenger.

Each candidate intervention changes exactly one passenger field, re-scores
the modified passenger and reports the gain over the base probability when
it clears the reporting threshold. Every score carries its own noise draw,
so the reported impacts (and occasionally the set of suggestions) vary
between calls for the same passenger.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

from ..core.config import IMPACT_THRESHOLD
from ..core.logging import get_logger
from ..ml.engine import calculate_survival_probability
from ..ml.features import PassengerInput, Sex, derive_features, parse_float, parse_int
from ..ml.noise import NoiseSource

logger = get_logger(__name__)


@dataclass(frozen=True)
class FactorSuggestion:
    factor: str
    change_to: str
    impact: float

    @property
    def impact_on_survival(self) -> str:
        return format_impact(self.impact)


@dataclass(frozen=True)
class Intervention:
    """A hypothetical single-field change and when it is worth trying."""

    factor: str
    change_to: str
    applies: Callable[[PassengerInput], bool]
    changes: Dict[str, Any]


WHAT_IF_INTERVENTIONS: List[Intervention] = [
    Intervention(
        factor="Gender",
        change_to="Female",
        applies=lambda p: p.sex == Sex.MALE.value,
        changes={"sex": Sex.FEMALE.value},
    ),
    Intervention(
        factor="Passenger Class",
        change_to="1st Class",
        applies=lambda p: parse_int(p.pclass) != 1,
        changes={"pclass": 1},
    ),
    Intervention(
        factor="Age",
        change_to="Child (under 16)",
        applies=lambda p: parse_float(p.age) >= 16,
        changes={"age": 10},
    ),
    Intervention(
        factor="Family Status",
        change_to="Traveling with family",
        applies=lambda p: parse_int(p.sibsp) == 0 and parse_int(p.parch) == 0,
        changes={"sibsp": 1},
    ),
    Intervention(
        factor="Cabin",
        change_to="Having a private cabin",
        applies=lambda p: not p.cabin,
        changes={"cabin": True},
    ),
]


def format_impact(impact: float) -> str:
    """Percentage-point gain with one decimal and an explicit sign, e.g. `+12.5%`."""
    return f"+{impact * 100:.1f}%"


def analyze_what_if(
    passenger: PassengerInput,
    noise: NoiseSource,
) -> Tuple[float, List[FactorSuggestion]]:
    """
    Score a passenger and every applicable intervention.

    Args:
        passenger: Validated passenger details
        noise: Source of the per-score perturbation (one draw per score)

    Returns:
        Tuple of (base_probability, suggestions) with suggestions in
        intervention order, only those gaining more than the threshold
    """
    base_probability = calculate_survival_probability(derive_features(passenger), noise)

    suggestions: List[FactorSuggestion] = []
    for intervention in WHAT_IF_INTERVENTIONS:
        if not intervention.applies(passenger):
            continue

        variant = passenger.with_changes(**intervention.changes)
        variant_probability = calculate_survival_probability(derive_features(variant), noise)
        impact = variant_probability - base_probability
        reported = impact > IMPACT_THRESHOLD

        logger.debug(
            "what_if_evaluated",
            factor=intervention.factor,
            probability=round(variant_probability, 4),
            impact=round(impact, 4),
            reported=reported,
        )
        if reported:
            suggestions.append(
                FactorSuggestion(
                    factor=intervention.factor,
                    change_to=intervention.change_to,
                    impact=impact,
                )
            )

    return base_probability, suggestions
