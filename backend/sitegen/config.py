import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# backend/sitegen/config.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_OUTPUT_ROOT = str(PROJECT_ROOT / "src" / "layouts")
DEFAULT_CONTENT_PATH = str(PROJECT_ROOT / "content" / "middle-coast.json")
DEFAULT_BRAND_PATH = str(PROJECT_ROOT / "content" / "brand.json")


class Settings:
    """Process-wide configuration, built once and passed to the clients that need it."""

    def __init__(
        self,
        anthropic_api_key: Optional[str] = None,
        analysis_model: str = "claude-sonnet-4-20250514",
        generation_model: str = "claude-3-5-sonnet-20241022",
        analysis_max_tokens: int = 4000,
        generation_max_tokens: int = 8000,
        fetch_method: str = "http",
        fetch_timeout: int = 30,
        log_level: str = "INFO",
        output_root: str = DEFAULT_OUTPUT_ROOT,
        content_path: str = DEFAULT_CONTENT_PATH,
        brand_path: str = DEFAULT_BRAND_PATH,
    ):
        self.anthropic_api_key = anthropic_api_key
        self.analysis_model = analysis_model
        self.generation_model = generation_model
        self.analysis_max_tokens = analysis_max_tokens
        self.generation_max_tokens = generation_max_tokens
        self.fetch_method = fetch_method
        self.fetch_timeout = fetch_timeout
        self.log_level = log_level
        # The HTTP service only writes below this directory
        self.output_root = output_root
        self.content_path = content_path
        self.brand_path = brand_path

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        # Load environment variables - .env in the working directory unless told otherwise
        load_dotenv(env_file)

        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            analysis_model=os.getenv("ANALYSIS_MODEL", "claude-sonnet-4-20250514"),
            generation_model=os.getenv("GENERATION_MODEL", "claude-3-5-sonnet-20241022"),
            analysis_max_tokens=int(os.getenv("ANALYSIS_MAX_TOKENS", "4000")),
            generation_max_tokens=int(os.getenv("GENERATION_MAX_TOKENS", "8000")),
            fetch_method=os.getenv("FETCH_METHOD", "http").lower(),
            fetch_timeout=int(os.getenv("FETCH_TIMEOUT", "30")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            output_root=os.getenv("OUTPUT_ROOT", DEFAULT_OUTPUT_ROOT),
            content_path=os.getenv("CONTENT_PATH", DEFAULT_CONTENT_PATH),
            brand_path=os.getenv("BRAND_PATH", DEFAULT_BRAND_PATH),
        )
