"""Root conftest: loads .env.test before any module imports."""
from __future__ import annotations

import os
from pathlib import Path

# Settings() is built at import time and needs the database credentials.
_REQUIRED_DEFAULTS = {
    "POSTGRES_USER": "recipe",
    "POSTGRES_PASSWORD": "recipe",
    "POSTGRES_DB": "recipe_feed_test",
}

_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())

for _key, _value in _REQUIRED_DEFAULTS.items():
    os.environ.setdefault(_key, _value)
