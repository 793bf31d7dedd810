"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; never read a developer's .env values
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
