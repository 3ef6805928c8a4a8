"""Point the settings at a throwaway SQLite file before anything imports the engine."""

import os
import tempfile
from pathlib import Path

_DB_DIR = Path(tempfile.mkdtemp(prefix="intered-tests-"))

os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["APP_ENV"] = "test"
os.environ["SESSION_SECRET"] = "test-secret"
