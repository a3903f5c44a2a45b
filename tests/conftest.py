"""Pytest configuration for the moneyparse test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 300 examples (thorough property testing)
- ci: CI runs with 50 examples, derandomized (fast, reproducible feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are skipped unless requested with
``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from moneyparse import DEFAULT_REGISTRY, Currency

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES, deadline=None)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    deadline=None,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    deadline=None,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile from the environment."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def usd() -> Currency:
    return DEFAULT_REGISTRY.lookup("USD")


@pytest.fixture
def eur() -> Currency:
    return DEFAULT_REGISTRY.lookup("EUR")


@pytest.fixture
def jpy() -> Currency:
    return DEFAULT_REGISTRY.lookup("JPY")
