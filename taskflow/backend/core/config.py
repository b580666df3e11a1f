# taskflow/backend/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 기본 앱 설정
    app_env: str = Field("local", alias="APP_ENV")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # DB
    database_url: str = Field("sqlite:///./taskflow.db", alias="DATABASE_URL")
    db_auto_create: bool = Field(False, alias="DB_AUTO_CREATE")

    # JWT
    jwt_secret_key: str = Field("taskflow-secret-key", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # CORS
    cors_allow_origins: str = Field(
        "http://localhost:3000,http://localhost:5173", alias="CORS_ALLOW_ORIGINS"
    )

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
