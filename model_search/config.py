"""
Search engine connection settings.

Values are read from environment variables, loaded from a .env file when one
is present.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

SEARCH_ENGINE_URL = os.getenv("SEARCH_ENGINE_URL", "http://localhost:9200")
SEARCH_ENGINE_API_KEY = os.getenv("SEARCH_ENGINE_API_KEY")
SEARCH_ENGINE_TIMEOUT = float(os.getenv("SEARCH_ENGINE_TIMEOUT", "10"))

# Used by the interactive demo (app.py)
SEARCH_INDEX_NAME = os.getenv("SEARCH_INDEX_NAME")
SEARCH_DOCUMENT_TYPE = os.getenv("SEARCH_DOCUMENT_TYPE")
