import os
from typing import Optional

from pydantic import BaseModel


class AppConfig(BaseModel):
    api_key: Optional[str] = None
    seed_sample_data: bool = True
    log_level: str = "INFO"


def load_config() -> AppConfig:
    return AppConfig(
        api_key=os.getenv("API_KEY") or None,
        seed_sample_data=os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
