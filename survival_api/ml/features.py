"""Passenger records and feature derivation.

Turns the raw values a passenger form submits into the fixed feature
schema the survival score is computed from: raw numerics, derived family
and age indicators, and one category per one-hot group.
"""

import math
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Type, Union

from ..core.config import (
    AGE_BINS,
    CHILD_AGE,
    DEFAULT_TITLE,
    FARE_BINS,
    TITLE_GROUPS,
    TITLE_VOCABULARY,
)

RawValue = Union[str, int, float, None]
Number = Union[int, float]


class Sex(str, Enum):
    FEMALE = "female"
    MALE = "male"


class Embarked(str, Enum):
    """Port of embarkation."""

    CHERBOURG = "C"
    QUEENSTOWN = "Q"
    SOUTHAMPTON = "S"


class Title(str, Enum):
    MASTER = "master"
    MISS = "miss"
    MR = "mr"
    MRS = "mrs"
    RARE = "rare"


class AgeGroup(str, Enum):
    ADULT = "adult"
    CHILD = "child"
    MIDDLEAGE = "middleage"
    SENIOR = "senior"


class FareGroup(str, Enum):
    HIGH = "high"
    LOW = "low"
    MEDIUM = "medium"
    VERYHIGH = "veryhigh"


class SexClass(str, Enum):
    """Sex x passenger class interaction."""

    FEMALE_1 = "female_1"
    FEMALE_2 = "female_2"
    FEMALE_3 = "female_3"
    MALE_1 = "male_1"
    MALE_2 = "male_2"
    MALE_3 = "male_3"

    @classmethod
    def of(cls, sex: Sex, pclass: Number) -> Optional["SexClass"]:
        """Combination for a sex and class, None when the class is not 1, 2 or 3."""
        if pclass not in (1, 2, 3):
            return None
        return cls(f"{sex.value}_{int(pclass)}")


# Column prefix -> category enum, in the order the flat schema lists them
ONE_HOT_GROUPS: Dict[str, Type[Enum]] = {
    "sex": Sex,
    "embarked": Embarked,
    "title": Title,
    "agegroup": AgeGroup,
    "faregroup": FareGroup,
    "sex_pclass": SexClass,
}


def one_hot_columns(group: str) -> list:
    """Flat column names of one one-hot group, e.g. `embarked_c`."""
    return [f"{group}_{member.value.lower()}" for member in ONE_HOT_GROUPS[group]]


@dataclass(frozen=True)
class PassengerInput:
    """
    Passenger details as submitted by a caller.

    Numeric fields may arrive as text (straight from a form) or as numbers;
    they are parsed during feature derivation, not here. `cabin` is the only
    optional field.
    """
    name: RawValue
    pclass: RawValue
    sex: RawValue
    age: RawValue
    sibsp: RawValue
    parch: RawValue
    fare: RawValue
    embarked: RawValue
    cabin: Optional[bool] = None

    def with_changes(self, **changes) -> "PassengerInput":
        """Copy of this passenger with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class FeatureSet:
    """Derived features for one passenger."""

    # Raw numerics, as parsed
    pclass: Number
    age: float
    sibsp: Number
    parch: Number
    fare: float

    # Derived numerics
    family_size: Number
    is_alone: int
    is_child: int
    has_cabin: int

    # Categories (one-hot groups)
    sex: Sex
    embarked: Embarked
    title: Title
    age_group: AgeGroup
    fare_group: FareGroup
    sex_pclass: Optional[SexClass] = field(default=None)

    def as_dict(self) -> Dict[str, Number]:
        """Flat feature table with every one-hot group expanded to 0/1 columns."""
        features: Dict[str, Number] = {
            "pclass": self.pclass,
            "age": self.age,
            "sibsp": self.sibsp,
            "parch": self.parch,
            "fare": self.fare,
            "familysize": self.family_size,
            "isalone": self.is_alone,
            "ischild": self.is_child,
            "hascabin": self.has_cabin,
        }
        selected = {
            "sex": self.sex,
            "embarked": self.embarked,
            "title": self.title,
            "agegroup": self.age_group,
            "faregroup": self.fare_group,
            "sex_pclass": self.sex_pclass,
        }
        for group, enum_cls in ONE_HOT_GROUPS.items():
            for member in enum_cls:
                features[f"{group}_{member.value.lower()}"] = int(selected[group] is member)
        return features


_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")
_TITLE_PATTERN = re.compile(r"\b(" + "|".join(TITLE_VOCABULARY) + r")\b", re.IGNORECASE)


def parse_float(value: RawValue) -> float:
    """
    Parse a decimal number the way a browser's `parseFloat` does.

    Leading whitespace is skipped and the longest numeric prefix is used, so
    "29.5 years" gives 29.5. Anything without a numeric prefix gives NaN.

    Args:
        value: Raw text or number

    Returns:
        Parsed value, NaN when unparseable
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def parse_int(value: RawValue) -> Number:
    """
    Parse an integer the way a browser's `parseInt` does.

    Parsing stops at the first non-digit ("2.7" gives 2, "3rd" gives 3) and a
    `0x` prefix is read as hexadecimal. Numbers are truncated toward zero.

    Args:
        value: Raw text or number

    Returns:
        Parsed integer, NaN when unparseable
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return math.nan
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if not match:
        return math.nan
    sign, digits = match.groups()
    parsed = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -parsed if sign == "-" else parsed


def extract_title(name: str) -> Title:
    """
    Title group from the first recognised honorific in a passenger name.

    Matching is case-insensitive on whole words; names without a known
    honorific fall back to `mr`.
    """
    match = _TITLE_PATTERN.search(name)
    if not match:
        return Title(DEFAULT_TITLE)
    honorific = match.group(1).lower()
    return Title(TITLE_GROUPS.get(honorific, honorific))


def age_group(age: float) -> AgeGroup:
    for upper, group in AGE_BINS:
        if age < upper:
            return AgeGroup(group)
    return AgeGroup.SENIOR


def fare_group(fare: float) -> FareGroup:
    for upper, group in FARE_BINS:
        if fare <= upper:
            return FareGroup(group)
    return FareGroup.VERYHIGH


def derive_features(passenger: PassengerInput) -> FeatureSet:
    """
    Build the feature set for a passenger.

    Args:
        passenger: Validated passenger details

    Returns:
        Immutable feature set; unparseable numerics come through as NaN
    """
    age = parse_float(passenger.age)
    fare = parse_float(passenger.fare)
    sibsp = parse_int(passenger.sibsp)
    parch = parse_int(passenger.parch)
    pclass = parse_int(passenger.pclass)

    family_size = sibsp + parch + 1
    sex = Sex(passenger.sex)

    return FeatureSet(
        pclass=pclass,
        age=age,
        sibsp=sibsp,
        parch=parch,
        fare=fare,
        family_size=family_size,
        is_alone=1 if family_size == 1 else 0,
        is_child=1 if age < CHILD_AGE else 0,
        has_cabin=1 if passenger.cabin else 0,
        sex=sex,
        embarked=Embarked(passenger.embarked),
        title=extract_title(str(passenger.name)),
        age_group=age_group(age),
        fare_group=fare_group(fare),
        sex_pclass=SexClass.of(sex, pclass),
    )
