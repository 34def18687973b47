"""Test-wide environment defaults.

Must run before any test module imports api.main, which loads Settings.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.pop("MONGO_URL", None)
