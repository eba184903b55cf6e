#file: aqstore/config.py

import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("AQSTORE_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_URL = os.getenv("AQSTORE_API_URL", "http://localhost:8000").rstrip("/")

try :
    PORT = int(os.getenv("AQSTORE_PORT", "8000"))
    START_ID = int(os.getenv("AQSTORE_START_ID", "0"))
except ValueError as e :
    raise ValueError(f"Invalid numeric store configuration: {e}") from e

if START_ID < 0 :
    raise ValueError("AQSTORE_START_ID must be non-negative")
