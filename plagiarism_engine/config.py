import os
from dotenv import load_dotenv

load_dotenv()

# ───── Storage ─────
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "classroom")

SUBMISSIONS_COLLECTION = "submissions"
PROFILES_COLLECTION = "profiles"
REPORTS_COLLECTION = "plagiarism_reports"

# ───── Similarity thresholds ─────
SIMILARITY_THRESHOLD = 70      # percent, sentence pair Jaccard
MIN_SENTENCE_LENGTH = 20       # characters
PEER_STATUS = "submitted"

# ───── Severity bands (overall similarity, percent) ─────
LOW_SIMILARITY_MAX = 20
MODERATE_SIMILARITY_MAX = 40
HIGH_SIMILARITY_MAX = 60

# ───── HTTP ─────
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else ["http://localhost:3000"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
