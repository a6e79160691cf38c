"""Root conftest: keep tests independent of the local environment."""

import os

os.environ.setdefault("FUNDA_API_KEY", "test-api-key")
os.environ.setdefault("FUNDA_BASE_URL", "https://mobile.funda.test/api/v1")
