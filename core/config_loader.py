import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str


class EligibilityThresholds(BaseModel):
    """Minimum match score for each eligibility band (0-100)."""
    qualified: int = 80
    likely_qualified: int = 60
    needs_review: int = 40


class MatchingConfig(BaseModel):
    """
    Configuration for the ProgramMatchingService.

    Programs scoring at or below min_match_score are dropped before ranking,
    and only the top_k remaining matches are returned.
    """
    min_match_score: int = 20
    top_k: int = 5
    eligibility: EligibilityThresholds = Field(default_factory=EligibilityThresholds)


class AppConfig(BaseModel):
    database: DatabaseConfig
    matching: Optional[MatchingConfig] = MatchingConfig()


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try absolute or adjusted path
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if 'database' not in data or data['database'] is None:
            data['database'] = {}
        data['database']['url'] = env_db_url

    return AppConfig(**data)
