"""Pytest configuration for the intlextract test suite.

Hypothesis profiles:
- dev: local runs, 100 examples
- ci: CI=true, 50 derandomized examples so failures reproduce

HYPOTHESIS_PROFILE=dev|ci overrides the detection.
"""

import os

from hypothesis import settings

settings.register_profile("dev", max_examples=100)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())
