# plagiarism_engine/dependencies/stores.py
from functools import lru_cache

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorClient

from plagiarism_engine.config import MONGODB_URI
from plagiarism_engine.stores.mongo_store import MongoReportStore, MongoSubmissionStore


@lru_cache(maxsize=1)
def get_mongo_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(MONGODB_URI)


def get_submission_store(mongo: AsyncIOMotorClient = Depends(get_mongo_client)) -> MongoSubmissionStore:
    return MongoSubmissionStore(mongo)


def get_report_store(mongo: AsyncIOMotorClient = Depends(get_mongo_client)) -> MongoReportStore:
    return MongoReportStore(mongo)
