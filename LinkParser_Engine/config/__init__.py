"""
Engine configuration: filesystem paths plus settings loaded from the environment.
"""

import os

from pydantic_settings import BaseSettings

# --- DYNAMIC PATH CONFIGURATION ---
# LinkParser_Engine/config/__init__.py -> parent is config -> parent is LinkParser_Engine -> parent is project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# --- OUTPUT ---
OUTPUT_DIR = os.path.join(BASE_DIR, "output")
INVENTORY_FILE = os.path.join(OUTPUT_DIR, "link_inventory.csv")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables"""

    # Monitoring and Logging
    LOG_LEVEL: str = "INFO"

    # How far back (in characters) the classifier looks for an enclosing tag
    TAG_LOOKBACK: int = 2048

    # Page fetcher
    FETCH_TIMEOUT: int = 15  # seconds per request
    USER_AGENT: str = "LinkParserBot/1.0"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
