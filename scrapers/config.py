from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings

# .env lives at the project root (one level above this file: scrapers/config.py → root/)
_ENV_FILE = str(Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # Browser
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 800

    # Page load
    navigation_timeout_ms: int = 60_000
    settle_delay_ms: int = 5_000

    # Output
    output_dir: str = "."
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    def get_output_path(self) -> Path:
        return Path(self.output_dir)

    model_config = {
        "env_file": _ENV_FILE,
        "env_prefix": "TIRE_",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
