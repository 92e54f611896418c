"""Global pytest fixtures for HELPERKIT."""

from __future__ import annotations

import os

from hypothesis import settings

# Property tests run with a small budget locally; CI opts into more examples.
settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile("ci", max_examples=500, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
