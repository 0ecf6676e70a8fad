"""
Point the app at a throwaway SQLite file and create the schema before any
test module imports app.main.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="coaching-tests-")
os.environ.setdefault("DB_URL", f"sqlite:///{os.path.join(_db_dir, 'test.db')}")

from app.db import Base, engine  # noqa: E402
from app import models  # noqa: E402,F401

Base.metadata.create_all(bind=engine)
