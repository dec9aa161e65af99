"""Central configuration defaults and constants for NPCForge."""

import os

# Ollama Defaults
DEFAULT_OLLAMA_BASE_URL = os.getenv("NPCFORGE_OLLAMA_BASE_URL", "http://localhost:11434/")
DEFAULT_OLLAMA_GENERATE_PATH = "api/generate"
DEFAULT_LLM_MODEL = os.getenv("NPCFORGE_LLM_MODEL", "qwen2.5:32b-instruct")
DEFAULT_LLM_TIMEOUT = int(os.getenv("NPCFORGE_LLM_TIMEOUT", "600"))  # 10 minutes, local inference is slow
DEFAULT_LLM_OUTPUT_FORMAT = "json"

# Sampling Defaults
# Tuned well above Ollama's defaults so repeated runs produce varied characters
DEFAULT_LLM_TEMPERATURE = float(os.getenv("NPCFORGE_LLM_TEMPERATURE", "1.2"))
DEFAULT_LLM_TOP_P = float(os.getenv("NPCFORGE_LLM_TOP_P", "0.95"))
DEFAULT_LLM_TOP_K = int(os.getenv("NPCFORGE_LLM_TOP_K", "50"))
DEFAULT_LLM_NUM_PREDICT = int(os.getenv("NPCFORGE_LLM_NUM_PREDICT", "8192"))

# Run Loop Defaults
DEFAULT_REQUEST_DELAY = float(os.getenv("NPCFORGE_REQUEST_DELAY", "0.5"))  # Seconds between attempts
DEFAULT_MAX_COUNT = int(os.getenv("NPCFORGE_MAX_COUNT", "25"))
DEFAULT_OUTPUT_DIR = os.getenv("NPCFORGE_OUTPUT_DIR", ".")

# Error excerpt lengths (characters of raw payload quoted in error messages)
DEFAULT_ENVELOPE_EXCERPT_LENGTH = 500
DEFAULT_SCHEMA_EXCERPT_LENGTH = 1000

# Character constraints
MIN_LEVEL = 1
MAX_LEVEL = 20
MAX_CLASSES = 3
DEFAULT_LEVEL_RANGE = (1, 10)
DEFAULT_ROLE = "Mercenary"
RANDOM_ROLE = "random"
