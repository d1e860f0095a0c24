"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

# Force reload of environment variables
load_dotenv(override=True)

# YouTube API Settings
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
API_SERVICE_NAME = "youtube"
API_VERSION = "v3"

# Paging limits enforced by the Data API
MAX_PAGE_SIZE = 50
DEFAULT_SEARCH_RESULTS = 10

# Logging Settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
