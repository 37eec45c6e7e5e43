from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plagiarism_engine.config import CORS_ORIGINS
from plagiarism_engine.logger import logger
from plagiarism_engine.routers.teacher.plagiarism_check import router as teacher_plagiarism_router

app = FastAPI(title="Submission Similarity Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(teacher_plagiarism_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


logger.info("Similarity engine routes registered")
