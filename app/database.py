"""Document Store Configuration and Connection Management Module

This module handles Firestore connectivity for the application. The Firebase
Admin SDK is initialized lazily on first use, from the service-account file
named by FIREBASE_CREDENTIALS_PATH or, when that is unset, from the
application-default credentials of the runtime.

Dependencies:
- firebase_admin: For Firebase app initialization and the async Firestore client.
- dotenv: For environment variable loading.
- loguru: For logging operations.
"""

import os
import threading
import firebase_admin
from firebase_admin import credentials, firestore_async
from dotenv import load_dotenv
from loguru import logger
load_dotenv()

_db = None
_db_lock = threading.Lock()

def _initialize_firebase_app():
    """Initialize the default Firebase app once.

    Raises:
        FileNotFoundError: If FIREBASE_CREDENTIALS_PATH points at a missing file
    """
    try:
        firebase_admin.get_app()
        return
    except ValueError:
        # No default app yet
        pass

    file_path = os.getenv("FIREBASE_CREDENTIALS_PATH")
    if file_path:
        if not os.path.exists(file_path):
            logger.error(f"Firebase credentials file not found at {file_path}")
            raise FileNotFoundError(f"Firebase credentials file not found at {file_path}")
        cred = credentials.Certificate(file_path)
    else:
        logger.info("FIREBASE_CREDENTIALS_PATH not set, using application default credentials")
        cred = credentials.ApplicationDefault()

    firebase_admin.initialize_app(cred)
    logger.info("Firebase app initialized")

def get_firestore_client():
    """FastAPI dependency returning the shared async Firestore client.

    Returns:
        google.cloud.firestore.AsyncClient: The document store client

    Example:
        @router.get("/interviews/{interview_id}")
        async def get_interview(interview_id: str, db = Depends(get_firestore_client)):
            ...
    """
    global _db

    if _db is None:
        with _db_lock:
            if _db is None:
                _initialize_firebase_app()
                _db = firestore_async.client()
    return _db
