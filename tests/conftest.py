"""Root conftest: point the app at a throw-away SQLite database before it is imported."""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="dealership-tests-")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["LOG_FORMAT"] = "text"
os.environ["CLOUDINARY_CLOUD_NAME"] = ""
os.environ["CLOUDINARY_API_KEY"] = ""
os.environ["CLOUDINARY_API_SECRET"] = ""
