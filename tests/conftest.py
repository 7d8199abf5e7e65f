"""Root conftest - shared test configuration."""

import os
from pathlib import Path

# Tests never reach a real server; static files come from the repo checkout
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault(
    "STATIC_DIR", str(Path(__file__).resolve().parent.parent / "static"),
)
os.environ.setdefault("LOG_FILE", "")
