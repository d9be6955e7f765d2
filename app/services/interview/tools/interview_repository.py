"""
Interview Repository Module

Reads and writes interview documents in the Firestore `interviews` collection.

Dependencies:
- google.cloud.firestore: For query filters and ordering against the async Firestore client.
- loguru: For logging operations.
"""
from typing import List, Optional
from google.cloud.firestore import Query
from google.cloud.firestore_v1.base_query import FieldFilter
from loguru import logger
from app.constants.feedback_constants import INTERVIEWS_COLLECTION
from app.schemas.interview.interview import Interview

class InterviewRepository:
    def __init__(self, db, log=None):
        self.db = db
        self.logger = log or logger.bind(component="interview_repository")

    async def add(self, interview: dict) -> str:
        """Create an interview document with a generated id and return the id."""
        _, interview_ref = await self.db.collection(INTERVIEWS_COLLECTION).add(interview)
        self.logger.info(f"Interview saved with ID {interview_ref.id}")
        return interview_ref.id

    async def get_by_id(self, interview_id: str) -> Optional[Interview]:
        snapshot = await self.db.collection(INTERVIEWS_COLLECTION).document(interview_id).get()
        if not snapshot.exists:
            return None
        return Interview(id=snapshot.id, **snapshot.to_dict())

    async def list_by_user(self, user_id: str) -> List[Interview]:
        query = (
            self.db.collection(INTERVIEWS_COLLECTION)
            .where(filter=FieldFilter("userId", "==", user_id))
            .order_by("createdAt", direction=Query.DESCENDING)
        )
        return [Interview(id=doc.id, **doc.to_dict()) async for doc in query.stream()]

    async def list_latest_finalized(self, exclude_user_id: str, limit: int = 20) -> List[Interview]:
        """Latest finalized interviews created by anyone other than exclude_user_id."""
        query = (
            self.db.collection(INTERVIEWS_COLLECTION)
            .order_by("createdAt", direction=Query.DESCENDING)
            .where(filter=FieldFilter("finalized", "==", True))
            .where(filter=FieldFilter("userId", "!=", exclude_user_id))
            .limit(limit)
        )
        return [Interview(id=doc.id, **doc.to_dict()) async for doc in query.stream()]
