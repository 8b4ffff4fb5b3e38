from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 앱 관련 설정
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # 로깅 관련 설정
    DATA_PATH: str = "./data"
    LOG_PATH: str = "/logs"
    ENVIRONMENT: str = "LOCAL"
    LOG_LEVEL: str = "DEBUG"
    APP_NAME: str = "flart"
    OTLP_ENDPOINT: str = "grafana-alloy.grafana-alloy.svc.cluster.local:4317"

    # Figma 관련 설정
    FIGMA_API_TOKEN: str | None = None
    FIGMA_API_BASE_URL: str = "https://api.figma.com/v1"
    FIGMA_API_TIMEOUT: int = 30

    # Dart 코드 생성 설정
    DART_BANNER_NAME: str = "Flart"


settings = Settings()


def get_setting() -> Settings:
    return settings
