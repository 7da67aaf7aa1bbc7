from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.stylelink"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "Stylelink"
    debug: bool = False
    log_level: str = "INFO"
    search_endpoint: str = ""
    validator_endpoint: str = ""
    search_timeout: float = 5.0
    validator_timeout: float = 5.0
    search_retry_attempts: int = 1
    validator_retry_attempts: int = 1
    retry_backoff_seconds: float = 0.5
    search_max_limit: int = 10
    resolution_candidate_limit: int = 5
    resolution_timeout: float = 20.0
    enrich_concurrency: int = 4
    image_min_dimension: int = 200
    image_name_match_threshold: float = 90.0

    model_config = {
        "env_prefix": "STYLELINK_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        if not self.search_endpoint:
            self.search_endpoint = _env_vars.get(
                "LINK_SCRAPER_SEARCH_URL",
                "https://link-scraper.adwate.workers.dev/search-product",
            )
        if not self.validator_endpoint:
            self.validator_endpoint = _env_vars.get(
                "LINK_SCRAPER_URL", "https://link-scraper.adwate.workers.dev/"
            )


settings = Settings()
