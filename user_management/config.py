"""配置管理"""

from functools import lru_cache
from typing import Annotated
from urllib.parse import quote

from pydantic import BaseModel, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """数据库配置"""

    driver: str = "postgresql+asyncpg"
    host: str = "localhost"
    port: int = Field(default=5432, ge=1, le=65535)
    name: str = "users"
    user: str = "postgres"
    password: SecretStr = SecretStr("")
    create_tables: bool = False

    @computed_field
    @property
    def url(self) -> str:
        """构建数据库连接 URL"""
        if self.driver.startswith("sqlite"):
            return f"{self.driver}:///{self.name}"
        user = quote(self.user, safe="")
        password = quote(self.password.get_secret_value(), safe="")
        return f"{self.driver}://{user}:{password}@{self.host}:{self.port}/{self.name}"


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        extra="ignore",
    )

    # 应用配置
    app_name: str = "User Management Service"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    api_prefix: str = "/api/v1"
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # 分页默认值（不设上限）
    default_page_size: int = Field(default=10, ge=1)

    # 数据库（嵌套配置）
    db: DatabaseConfig = DatabaseConfig()

    # CORS（空列表=不启用）
    cors_origins: Annotated[list[str], NoDecode] = []

    @computed_field
    @property
    def database_url(self) -> str:
        """数据库连接 URL（供 SQLAlchemy 使用）"""
        return self.db.url

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            msg = f"log_level must be one of {sorted(allowed)}"
            raise ValueError(msg)
        return upper

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """全局单例"""
    return Settings()
