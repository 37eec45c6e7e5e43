import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from plagiarism_engine.config import (
    MONGODB_DB,
    SUBMISSIONS_COLLECTION,
    PROFILES_COLLECTION,
    REPORTS_COLLECTION,
    PEER_STATUS,
)
from plagiarism_engine.errors import StoreError
from plagiarism_engine.schemas.plagiarism_schemas import (
    ComparedStudent,
    PlagiarismReport,
    StoredPlagiarismReport,
)
from plagiarism_engine.schemas.submission_schemas import PeerSubmission

logger = logging.getLogger("mongo_store")


class MongoSubmissionStore:
    def __init__(self, client: AsyncIOMotorClient, db_name: str = MONGODB_DB):
        self.collection = client[db_name][SUBMISSIONS_COLLECTION]

    async def get_content(self, submission_id: str) -> Optional[str]:
        try:
            doc = await self.collection.find_one({"_id": submission_id}, {"content": 1})
        except PyMongoError as e:
            raise StoreError(f"Failed to fetch submission {submission_id}: {e}") from e
        if doc is None:
            return None
        return doc.get("content") or ""

    async def list_submitted(self, assignment_id: str, excluding_id: str) -> List[PeerSubmission]:
        query = {
            "assignment_id": assignment_id,
            "_id": {"$ne": excluding_id},
            "status": PEER_STATUS,
        }
        try:
            docs = await self.collection.find(query, {"content": 1}).to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Failed to list submissions for assignment {assignment_id}: {e}") from e
        return [PeerSubmission(id=str(d["_id"]), content=d.get("content") or "") for d in docs]


class MongoReportStore:
    def __init__(self, client: AsyncIOMotorClient, db_name: str = MONGODB_DB):
        self.collection = client[db_name][REPORTS_COLLECTION]

    async def insert(self, report: PlagiarismReport) -> str:
        try:
            result = await self.collection.insert_one(report.model_dump())
        except PyMongoError as e:
            raise StoreError(
                f"Failed to save report {report.submission_id} vs {report.compared_submission_id}: {e}"
            ) from e
        return str(result.inserted_id)

    async def list_by_submission(self, submission_id: str) -> List[StoredPlagiarismReport]:
        pipeline = [
            {"$match": {"submission_id": submission_id}},
            {"$sort": {"similarity_score": -1}},
            {"$lookup": {
                "from": SUBMISSIONS_COLLECTION,
                "localField": "compared_submission_id",
                "foreignField": "_id",
                "as": "compared_submission",
            }},
            {"$unwind": {"path": "$compared_submission", "preserveNullAndEmptyArrays": True}},
            {"$lookup": {
                "from": PROFILES_COLLECTION,
                "localField": "compared_submission.student_id",
                "foreignField": "_id",
                "as": "student",
            }},
            {"$unwind": {"path": "$student", "preserveNullAndEmptyArrays": True}},
        ]
        try:
            docs = await self.collection.aggregate(pipeline).to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Failed to load reports for submission {submission_id}: {e}") from e
        logger.debug(f"Loaded {len(docs)} reports for submission {submission_id}")
        return [_report_from_document(d) for d in docs]


def _report_from_document(doc: Dict[str, Any]) -> StoredPlagiarismReport:
    student = doc.get("student")
    return StoredPlagiarismReport(
        id=str(doc["_id"]),
        submission_id=doc["submission_id"],
        compared_submission_id=doc["compared_submission_id"],
        similarity_score=doc["similarity_score"],
        matched_content=doc.get("matched_content", []),
        created_at=doc["created_at"],
        compared_student=ComparedStudent(
            full_name=student.get("full_name"),
            email=student.get("email"),
        ) if student else None,
    )
