# ilmquest/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Ilmquest")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # Hugging Face router (default engine)
    HUGGINGFACE_API_KEY: str | None = None
    HF_MODEL: str = Field(default="deepseek-ai/DeepSeek-V3-0324:fastest")
    HF_CHAT_URL: str = Field(default="https://router.huggingface.co/v1/chat/completions")

    # OpenAI
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")

    # Ollama (local)
    USE_OLLAMA: bool = Field(default=False)
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    # generation
    HISTORY_WINDOW: int = Field(default=10)
    MAX_TOKENS: int = Field(default=700)
    REQUEST_TIMEOUT: float = Field(default=60.0)

    # read root-level .env.dev
    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
