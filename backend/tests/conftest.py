"""Root conftest — shared test configuration."""

import os

# Keep tests independent of a developer's .env / deployment settings
os.environ.setdefault("BASE_URL", "https://golf-intel.test")
os.environ.setdefault("LOG_FORMAT", "text")
