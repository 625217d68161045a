"""
Pytest configuration and shared fixtures for the survival API test suite.

Scores carry random noise by default. Tests that check exact values inject
`ZeroNoise` or `SequenceNoise`; tests running with real noise only assert
bounds, since the same passenger can get different suggestions per call.
"""

import os

import pytest

# No artificial delay in tests, set BEFORE importing the app
os.environ["SURVIVAL_LATENCY_MIN_SECONDS"] = "0"
os.environ["SURVIVAL_LATENCY_JITTER_SECONDS"] = "0"

from fastapi.testclient import TestClient

from survival_api.ml.features import PassengerInput
from survival_api.ml.noise import ZeroNoise
from survival_api.services.survival import SimulatedLatency


def make_passenger(**overrides) -> PassengerInput:
    """Factory for a lone third-class man; the passenger most suggestions apply to."""
    defaults = dict(
        name="Mr. John Smith",
        pclass="3",
        sex="male",
        age="30",
        sibsp="0",
        parch="0",
        fare="8",
        embarked="S",
        cabin=False,
    )
    defaults.update(overrides)
    return PassengerInput(**defaults)


def passenger_payload(**overrides) -> dict:
    """JSON body matching `make_passenger` for API tests."""
    payload = {
        "name": "Mr. John Smith",
        "pclass": "3",
        "sex": "male",
        "age": "30",
        "sibsp": "0",
        "parch": "0",
        "fare": "8",
        "cabin": False,
        "embarked": "S",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def passenger() -> PassengerInput:
    return make_passenger()


@pytest.fixture
def zero_noise() -> ZeroNoise:
    return ZeroNoise()


@pytest.fixture
def no_latency() -> SimulatedLatency:
    return SimulatedLatency()


@pytest.fixture
def client():
    from survival_api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def deterministic_noise(monkeypatch):
    """Make the service's default noise source return zero."""
    from survival_api.services import survival

    monkeypatch.setattr(survival, "_default_noise", lambda: ZeroNoise())
