from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Provider ---
    PROVIDER: str = "Gemini"  # hoặc "OpenAI" | "Azure OpenAI"

    # --- Gemini ---
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # --- OpenAI ---
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"

    # --- Azure OpenAI ---
    AZURE_OPENAI_API_KEY: str = ""
    AZURE_OPENAI_API_BASE: str = ""
    AZURE_OPENAI_DEPLOYMENT: str = ""
    AZURE_OPENAI_API_VERSION: str = "2024-02-15-preview"

    # --- Common model parameters ---
    MAX_TOKENS: int = 4096
    TEMPERATURE: float = 0.2

    # Bỏ cặp ``` ngoài cùng nếu model không tuân theo yêu cầu "raw text"
    STRIP_CODE_FENCES: bool = False

    # --- Logging ---
    LOG_DIR: str = "tmp"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
