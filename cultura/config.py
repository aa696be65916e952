"""Configuration module for CULTURA"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base directories
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
CULTURAL_DATA_FILE = DATA_DIR / "cultural_data.json"

# Credentials (unset means "service unavailable", never an import error)
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
BHASHINI_USER_ID = os.getenv("BHASHINI_USER_ID", "")
BHASHINI_API_KEY = os.getenv("BHASHINI_API_KEY", "")

# Network settings
USER_AGENT = "CULTURA/0.1"
REQUEST_TIMEOUT = 10  # seconds
MAX_RETRIES = 3
RETRY_BASE_DELAY = 1.0  # seconds, doubled on each retry

# Remote translation pipeline (BHASHINI / ULCA)
BHASHINI_PIPELINE_URL = "https://meity-auth.ulcacontrib.org/ulca/apis/v0/model/getModelsPipeline"
BHASHINI_COMPUTE_URL = "https://meity-auth.ulcacontrib.org/ulca/apis/v0/model/compute"
BHASHINI_PIPELINE_ID = "64392f96daac500b55c543cd"

# Best-effort public lookup (MyMemory, no key required)
PUBLIC_LOOKUP_URL = "https://api.mymemory.translated.net/get"
PUBLIC_LOOKUP_MAX_CHARS = 500

# Translation cache
CACHE_MAX_SIZE = 1000
CACHE_TTL = 3600  # seconds (1 hour)

# Remote LLM
LLM_MODEL_NAME = os.getenv("CULTURA_LLM_MODEL", "claude-3-5-sonnet-20241022")
LLM_MAX_TOKENS = 1024
GROUNDING_CONTEXT_SIZE = 3  # entities passed to the LLM as context

# Chat knowledge scoring (observed defaults, no documented rationale)
SCORE_EXACT = 100
SCORE_CONTAINS = 50
SCORE_TOKEN_IN_KEYWORD = 25
SCORE_PARTIAL = 10
SCORE_NAME_TOKEN_BONUS = 30
MIN_TOKEN_LENGTH = 3  # tokens of length <= 2 are ignored
MIN_MATCH_SCORE = 25
MAX_KEYWORD_CONFIDENCE = 0.9
STATE_MATCH_LIMIT = 3

# Conversation settings
MAX_CONTEXT_MESSAGES = 6
