"""Shared fixtures for Mentor Match tests."""

import pytest

from mentormatch.domain.models import Profile
from mentormatch.logging.context import clear_log_context


def make_profile(email: str, expertise: str, interest: str, **overrides) -> Profile:
    """Build a Profile with sensible defaults for the fields tests don't care about."""
    fields = {
        "name": email.split("@")[0].title(),
        "expertise": expertise,
        "interest": interest,
        "expertise_years": 3,
        "interest_years": 1,
        "email": email,
        "phone_number": "555-0000",
    }
    fields.update(overrides)
    return Profile(**fields)


def sequence_rng(values):
    """Generator stub returning the given floats in order, counting calls."""
    iterator = iter(values)

    def rng():
        rng.calls += 1
        return next(iterator)

    rng.calls = 0
    return rng


def constant_rng(value: float):
    """Generator stub that always returns value, counting calls."""

    def rng():
        rng.calls += 1
        return value

    rng.calls = 0
    return rng


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep logging context from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def viewer():
    """The browsing user: teaches software development, wants machine learning."""
    return make_profile(
        "current@example.com",
        "Software Development",
        "Machine Learning",
        name="Current User",
        expertise_years=5,
        interest_years=2,
    )


@pytest.fixture
def both_axes_match():
    """Teaches what the viewer wants and wants what the viewer teaches."""
    return make_profile("profile1@example.com", "Machine Learning", "Software Development")


@pytest.fixture
def expertise_axis_match():
    """Teaches what the viewer wants; wants something unrelated."""
    return make_profile("profile2@example.com", "Machine Learning", "Data Science")


@pytest.fixture
def interest_axis_match():
    """Wants what the viewer teaches; teaches something unrelated."""
    return make_profile("profile3@example.com", "Design", "Software Development")


@pytest.fixture
def no_match():
    """No overlap with the viewer in either direction."""
    return make_profile("profile4@example.com", "Marketing", "Sales")


@pytest.fixture
def candidates(both_axes_match, expertise_axis_match, interest_axis_match, no_match):
    """Four candidates covering every scoring combination."""
    return [both_axes_match, expertise_axis_match, interest_axis_match, no_match]
