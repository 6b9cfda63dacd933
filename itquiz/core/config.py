from __future__ import annotations

from pathlib import Path
from typing import Annotated, List, Any
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator

DEFAULT_QUIZ_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "quiz.json"


class Settings(BaseSettings):
    # Read .env; unknown keys are rejected to catch typos
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    # General
    APP_NAME: str = "IT Quiz Backend"
    API_V1_PREFIX: str = "/api/v1"
    APP_ENV: str = Field(
        "dev",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Application environment: dev|staging|prod",
    )
    LOG_LEVEL: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Root logging level",
    )

    # Hosts/ports
    BACKEND_HOST: str = Field(
        "0.0.0.0",
        validation_alias=AliasChoices("BACKEND_HOST", "app_host"),
        description="Backend host to bind",
    )
    BACKEND_PORT: int = Field(
        3000,
        validation_alias=AliasChoices("BACKEND_PORT", "app_port"),
        description="Backend port to bind",
    )

    # Quiz dataset
    QUIZ_DATA_PATH: Path = Field(
        DEFAULT_QUIZ_DATA_PATH,
        validation_alias=AliasChoices("QUIZ_DATA_PATH", "quiz_data_path"),
        description="JSON file with the ordered list of quiz entries",
    )

    # Base of the answer link rendered under each question
    ANSWER_LINK_BASE_URL: str = Field(
        "https://shige-it-quiz-backend.vercel.app",
        validation_alias=AliasChoices("ANSWER_LINK_BASE_URL", "answer_link_base_url"),
        description="Public URL of this backend, used in question-mode messages",
    )

    # CORS origins
    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, v: Any) -> Any:
        """
        Allows FRONTEND_ORIGINS in .env as:
        - a JSON array: ["http://localhost:5173","http://localhost:3000"]
        - or a string: http://localhost:5173,http://localhost:3000
        - or with ; as the separator
        """
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    return json.loads(s)
                except ValueError:
                    # malformed JSON: fall back to split
                    pass
            return [item.strip() for item in s.replace(";", ",").split(",") if item.strip()]
        return v

    @field_validator("ANSWER_LINK_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def answer_link(self, index: int) -> str:
        return f"{self.ANSWER_LINK_BASE_URL}{self.API_V1_PREFIX}/quizzes/{index}"


settings = Settings()
