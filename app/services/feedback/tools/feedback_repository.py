"""
Feedback Repository Module

Reads and writes feedback documents in the Firestore `feedback` collection.

A save either overwrites the document at a known id (the caller passed a
feedbackId) or creates a document with a store-generated id. The lookup for an
interview returns the first document matching the (interviewId, userId) pair;
nothing at the storage level prevents a second one from existing.

Dependencies:
- google.cloud.firestore: For query filters against the async Firestore client.
- loguru: For logging operations.
"""
from typing import Optional
from google.cloud.firestore_v1.base_query import FieldFilter
from loguru import logger
from app.constants.feedback_constants import FEEDBACK_COLLECTION
from app.errors.exceptions import PersistenceError
from app.schemas.feedback.feedback_record import FeedbackRecord, StoredFeedback

class FeedbackRepository:
    def __init__(self, db, log=None):
        self.db = db
        self.logger = log or logger.bind(component="feedback_repository")

    async def save(self, record: FeedbackRecord, feedback_id: Optional[str] = None) -> str:
        """
        Persist a feedback record.

        Args:
            record: The complete record to write
            feedback_id: Existing document id to overwrite, or None to create

        Returns:
            str: Id of the written document

        Raises:
            PersistenceError: If the store write fails
        """
        collection = self.db.collection(FEEDBACK_COLLECTION)
        if feedback_id:
            self.logger.info(f"Updating existing feedback {feedback_id}")
            feedback_ref = collection.document(feedback_id)
        else:
            self.logger.info("Creating new feedback document")
            feedback_ref = collection.document()

        try:
            await feedback_ref.set(record.to_document())
        except Exception as e:
            self.logger.error(f"Firestore write failed for feedback {feedback_ref.id}: {e}")
            raise PersistenceError(str(e) or None) from e

        self.logger.info(f"Feedback saved with ID {feedback_ref.id}")
        return feedback_ref.id

    async def get_by_interview(self, interview_id: str, user_id: str) -> Optional[StoredFeedback]:
        """Return the current feedback for an interview and user, or None."""
        query = (
            self.db.collection(FEEDBACK_COLLECTION)
            .where(filter=FieldFilter("interviewId", "==", interview_id))
            .where(filter=FieldFilter("userId", "==", user_id))
            .limit(1)
        )
        async for doc in query.stream():
            return StoredFeedback(id=doc.id, **doc.to_dict())
        return None
