"""Pytest configuration for property-based tests.

Select a Hypothesis profile with the HYPOTHESIS_PROFILE environment variable.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    verbosity=Verbosity.normal,
)

settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    verbosity=Verbosity.verbose,
)

settings.register_profile(
    "quick",
    max_examples=10,
    deadline=None,
    phases=[Phase.generate],
)

settings.register_profile(
    "thorough",
    max_examples=500,
    deadline=None,
)

_profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
if _profile in ("ci", "dev", "quick", "thorough"):
    settings.load_profile(_profile)


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/property with the 'property' marker."""
    for item in items:
        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
