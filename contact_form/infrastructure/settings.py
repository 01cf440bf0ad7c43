from __future__ import annotations

import os
from pathlib import Path

BUNDLED_CREDENTIALS_FILENAME = "firebase-service-account.json"
DEFAULT_BUNDLED_CREDENTIALS = str(
    Path(__file__).resolve().parent.parent / "resources" / BUNDLED_CREDENTIALS_FILENAME
)

# Empty string means "not configured"
CREDENTIALS_PATH = os.environ.get("FIREBASE_CREDENTIALS", "").strip()
DATABASE_ID = os.environ.get("FIREBASE_DATABASE_ID", "").strip()
BUNDLED_CREDENTIALS_PATH = os.environ.get(
    "FIREBASE_BUNDLED_CREDENTIALS", DEFAULT_BUNDLED_CREDENTIALS
)
COLLECTION_NAME = os.environ.get("FIRESTORE_COLLECTION", "contactMessages")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8080"))
