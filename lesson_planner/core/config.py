from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"  # Fast, reliable, good Swedish curriculum knowledge
    generation_temperature: float = 0.3
    generation_max_output_tokens: int = 2048

    # Curriculum ranking
    ranking_min_score: float = 0.3
    ranking_grade_floor: float = 0.4
    ranking_top_k: int = 4

    # Generation quality / retries
    max_generation_attempts: int = 3
    retry_delay_seconds: float = 1.0
    min_quality_score: float = 0.6
    min_plan_length: int = 200

    # URLs
    frontend_url: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
