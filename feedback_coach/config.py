"""
Configuration management for the feedback coach.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base paths
PACKAGE_DIR = Path(__file__).parent
STATIC_DIR = PACKAGE_DIR / "static"

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Provider configuration: deepseek | ollama | demo
PROVIDER = os.getenv("PROVIDER", "deepseek").lower()
DEMO_MODE = os.getenv("DEMO_MODE", "false").lower() == "true"

DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY", "")
DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")

OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3.1")

# Upload limits
MAX_FILE_MB = float(os.getenv("MAX_FILE_MB", "30"))


class Config:
    """Application configuration class."""

    def __init__(self):
        self.host = HOST
        self.port = PORT
        self.log_level = LOG_LEVEL
        self.provider = PROVIDER
        self.demo_mode = DEMO_MODE
        self.deepseek_api_key = DEEPSEEK_API_KEY
        self.deepseek_model = DEEPSEEK_MODEL
        self.deepseek_base_url = DEEPSEEK_BASE_URL
        self.ollama_url = OLLAMA_URL
        self.ollama_model = OLLAMA_MODEL
        self.max_file_mb = MAX_FILE_MB

    @property
    def max_file_bytes(self) -> int:
        return int(self.max_file_mb * 1024 * 1024)

    @property
    def demo_active(self) -> bool:
        """Demo output is served when forced or when demo is the selected provider."""
        return self.demo_mode or self.provider == 'demo'

    def to_dict(self):
        return {
            "host": self.host,
            "port": self.port,
            "provider": self.provider,
            "demo_mode": self.demo_mode,
            "deepseek_key_loaded": bool(self.deepseek_api_key),
            "deepseek_model": self.deepseek_model,
            "ollama_url": self.ollama_url,
            "ollama_model": self.ollama_model,
            "max_file_mb": self.max_file_mb,
        }

    def update(self, data: dict):
        for key, value in data.items():
            if hasattr(self, key):
                setattr(self, key, value)


# Global config instance
config = Config()
