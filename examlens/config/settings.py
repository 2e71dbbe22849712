from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    image_max_edge: int = 1024
    image_jpeg_quality: int = 50

    analysis_provider: str = "gemini"
    analysis_temperature: float = 0.4

    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""
    openai_compatible_timeout_seconds: int = 60

    openrouter_api_key: str = ""
    openrouter_model_name: str = "google/gemini-2.5-flash"
    openrouter_timeout_seconds: int = 60

    groq_api_key: str = ""
    groq_model_name: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    groq_timeout_seconds: int = 60

    together_api_key: str = ""
    together_model_name: str = "meta-llama/Llama-4-Maverick-17B-128E-Instruct-FP8"
    together_timeout_seconds: int = 60
