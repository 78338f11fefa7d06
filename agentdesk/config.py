from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "AGENTDESK_"}

    # App
    app_name: str = "AgentDesk Calculators"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (the SPA client is served from a different origin in development)
    cors_origins: list[str] = ["*"]


settings = Settings()
