"""Configuration and environment handling for the HubSpot MCP gateway."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class HubSpotConfig:
    """Remote CRM connection settings."""

    def __init__(self):
        self.access_token: Optional[str] = os.getenv("HUBSPOT_ACCESS_TOKEN") or None
        self.api_base: str = os.getenv("HUBSPOT_API_BASE", "https://api.hubapi.com")
        self.timeout_s: float = float(os.getenv("HUBSPOT_TIMEOUT_S", "30"))


class Config:
    """Central configuration object."""

    def __init__(self):
        # Load .env file if it exists
        env_path = Path(__file__).parent.parent.parent / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        self.project_root = Path(__file__).parent.parent.parent

        # Logging
        self.log_level: str = os.getenv("HUBSPOT_MCP_LOG_LEVEL", "INFO")

        # HTTP front door
        self.host: str = os.getenv("HUBSPOT_MCP_HOST", "0.0.0.0")
        self.port: int = int(os.getenv("HUBSPOT_MCP_PORT", "8000"))

        # Remote CRM
        self.hubspot = HubSpotConfig()


# Global config instance
config = Config()
