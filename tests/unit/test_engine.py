"""
Unit tests for the survival score and the noise sources.
"""

import pytest

from survival_api.ml.engine import (
    calculate_survival_probability,
    heuristic_score,
    score_breakdown,
)
from survival_api.ml.features import derive_features
from survival_api.ml.noise import SequenceNoise, UniformNoise, ZeroNoise
from tests.conftest import make_passenger


def _score(noise=None, **overrides) -> float:
    features = derive_features(make_passenger(**overrides))
    return calculate_survival_probability(features, noise or ZeroNoise())


# ============================================================================
# Noise sources
# ============================================================================


class TestNoiseSources:

    def test_zero_noise(self):
        assert ZeroNoise().draw() == 0.0

    def test_uniform_noise_bounds(self):
        noise = UniformNoise(seed=7)
        draws = [noise.draw() for _ in range(500)]
        assert all(-0.05 <= d < 0.05 for d in draws)
        assert len(set(draws)) > 1

    def test_uniform_noise_seed_replays(self):
        a, b = UniformNoise(seed=42), UniformNoise(seed=42)
        assert [a.draw() for _ in range(5)] == [b.draw() for _ in range(5)]

    def test_uniform_noise_custom_amplitude(self):
        noise = UniformNoise(amplitude=0.01, seed=1)
        assert all(-0.01 <= noise.draw() < 0.01 for _ in range(100))

    def test_sequence_noise_replays_in_order(self):
        noise = SequenceNoise([0.01, -0.02])
        assert noise.remaining == 2
        assert noise.draw() == 0.01
        assert noise.draw() == -0.02
        assert noise.remaining == 0

    def test_sequence_noise_exhausted(self):
        noise = SequenceNoise([])
        with pytest.raises(IndexError):
            noise.draw()


# ============================================================================
# Score breakdown
# ============================================================================


class TestScoreBreakdown:

    def test_breakdown_lone_third_class_man(self, passenger):
        factors = [a.factor for a in score_breakdown(derive_features(passenger))]
        assert factors == ["sex_male", "third_class", "alone", "male_third_class"]

    def test_breakdown_follows_fixed_order(self):
        features = derive_features(
            make_passenger(
                name="Mrs. Ada West",
                sex="female",
                pclass="1",
                age="35",
                sibsp="1",
                fare="80",
                cabin=True,
            )
        )
        factors = [a.factor for a in score_breakdown(features)]
        assert factors == [
            "sex_female",
            "first_class",
            "cabin",
            "fare_veryhigh",
            "title_mrs",
            "female_first_class",
        ]

    def test_breakdown_child_and_master(self):
        features = derive_features(make_passenger(name="Master Tom", age="6", parch="2"))
        deltas = {a.factor: a.delta for a in score_breakdown(features)}
        assert deltas["child"] == 0.15
        assert deltas["title_master"] == 0.1
        assert "alone" not in deltas

    def test_breakdown_senior_and_large_family(self):
        features = derive_features(make_passenger(age="64", sibsp="3", parch="2", fare="7.5"))
        deltas = {a.factor: a.delta for a in score_breakdown(features)}
        assert deltas["senior"] == -0.1
        assert deltas["large_family"] == -0.1
        assert deltas["fare_low"] == -0.05

    def test_breakdown_family_of_four_has_no_family_adjustment(self):
        features = derive_features(make_passenger(sibsp="1", parch="2"))
        factors = [a.factor for a in score_breakdown(features)]
        assert "alone" not in factors
        assert "large_family" not in factors

    def test_second_class_has_no_class_adjustment(self):
        features = derive_features(make_passenger(pclass="2"))
        factors = [a.factor for a in score_breakdown(features)]
        assert factors == ["sex_male", "alone"]


# ============================================================================
# Heuristic score and probability
# ============================================================================


class TestSurvivalProbability:

    def test_heuristic_score_clamps_at_zero(self, passenger):
        # 0.5 - 0.3 - 0.15 - 0.05 - 0.15
        assert heuristic_score(derive_features(passenger)) == 0.0

    def test_heuristic_score_clamps_at_one(self):
        features = derive_features(
            make_passenger(name="Mrs. Ada West", sex="female", pclass="1", fare="80", cabin=True)
        )
        assert heuristic_score(features) == 1.0

    def test_heuristic_score_third_class_woman(self):
        features = derive_features(make_passenger(sex="female"))
        assert heuristic_score(features) == pytest.approx(0.7)

    def test_switching_sex_raises_score(self):
        male = _score()
        female = _score(sex="female")
        # male is lifted from 0.0 to the 0.05 floor
        assert male == pytest.approx(0.05)
        assert female == pytest.approx(0.7)
        assert female - male > 0.05

    def test_probability_floor_and_ceiling_with_zero_noise(self):
        assert _score() == pytest.approx(0.05)
        assert _score(name="Mrs. Ada West", sex="female", pclass="1", fare="80", cabin=True) == pytest.approx(0.95)

    def test_noise_is_added_after_clamping(self):
        assert _score(SequenceNoise([0.03]), sex="female") == pytest.approx(0.73)
        assert _score(SequenceNoise([-0.049]), sex="female") == pytest.approx(0.651)

    def test_noise_cannot_leave_bounds(self):
        assert _score(SequenceNoise([-0.05])) == pytest.approx(0.05)
        assert _score(
            SequenceNoise([0.049]),
            name="Mrs. Ada West", sex="female", pclass="1", fare="80", cabin=True,
        ) == pytest.approx(0.95)

    def test_one_draw_per_score(self, passenger):
        noise = SequenceNoise([0.0, 0.0])
        calculate_survival_probability(derive_features(passenger), noise)
        assert noise.remaining == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"sex": "female", "pclass": "1"},
            {"name": "Master Tom", "age": "3", "pclass": "2", "parch": "2"},
            {"age": "70", "fare": "5", "sibsp": "5"},
            {"sex": "female", "pclass": "1", "fare": "300", "cabin": True, "name": "Mrs. X"},
        ],
    )
    def test_random_noise_stays_in_bounds(self, overrides):
        features = derive_features(make_passenger(**overrides))
        assert 0.0 <= heuristic_score(features) <= 1.0
        noise = UniformNoise()
        for _ in range(50):
            assert 0.05 <= calculate_survival_probability(features, noise) <= 0.95
