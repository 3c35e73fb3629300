"""
Configuration for Files Manager.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000


class RedisConfig(BaseModel):
    """Redis token cache configuration."""

    url: str = "redis://localhost:6379/0"
    socket_timeout: float = 5.0


class DatabaseConfig(BaseModel):
    """Document store configuration."""

    path: str = "data/files_manager.db"


class StorageConfig(BaseModel):
    """Blob storage configuration."""

    folder_path: str = "/tmp/files_manager"


class AuthConfig(BaseModel):
    """Session and listing limits."""

    token_ttl_seconds: int = Field(default=86400, gt=0)
    page_size: int = Field(default=20, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = False


class Config(BaseModel):
    """Main configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Store backends
    kv_backend: str = "redis"  # redis, memory
    document_backend: str = "sqlite"

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            FM_HOST / FM_PORT: Server bind address
            FM_KV_BACKEND: Token store backend (redis, memory)
            FM_REDIS_URL: Redis connection URL
            FM_DOCUMENT_BACKEND: Document store backend (sqlite)
            FM_DB_PATH: SQLite database file
            FOLDER_PATH / FM_FOLDER_PATH: Blob storage root
            FM_TOKEN_TTL: Token lifetime in seconds
            FM_PAGE_SIZE: Entries per listing page
            FM_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        # FOLDER_PATH is the historical name of the storage root variable
        folder_path = get_env("FM_FOLDER_PATH") or get_env("FOLDER_PATH", "/tmp/files_manager")

        return cls(
            server=ServerConfig(
                host=get_env("FM_HOST", "0.0.0.0"),
                port=get_env("FM_PORT", 5000),
            ),
            redis=RedisConfig(
                url=get_env("FM_REDIS_URL", "redis://localhost:6379/0"),
                socket_timeout=get_env("FM_REDIS_SOCKET_TIMEOUT", 5.0),
            ),
            database=DatabaseConfig(
                path=get_env("FM_DB_PATH", "data/files_manager.db"),
            ),
            storage=StorageConfig(folder_path=folder_path),
            auth=AuthConfig(
                token_ttl_seconds=get_env("FM_TOKEN_TTL", 86400),
                page_size=get_env("FM_PAGE_SIZE", 20),
            ),
            logging=LoggingConfig(
                level=get_env("FM_LOG_LEVEL", "INFO"),
                log_to_file=get_env("FM_LOG_TO_FILE", False),
                log_dir=get_env("FM_LOG_DIR", "logs"),
                file_rotation=get_env("FM_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("FM_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("FM_LOG_COMPRESSION", "zip"),
                serialize=get_env("FM_LOG_SERIALIZE", False),
            ),
            kv_backend=get_env("FM_KV_BACKEND", "redis"),
            document_backend=get_env("FM_DOCUMENT_BACKEND", "sqlite"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Env values that differ from the defaults win over YAML
        default = cls()
        final_dict = {**config_dict}
        for section in ("server", "redis", "database", "storage", "auth", "logging"):
            if getattr(env_config, section) != getattr(default, section):
                final_dict[section] = getattr(env_config, section).model_dump()
        for field in ("kv_backend", "document_backend"):
            if getattr(env_config, field) != getattr(default, field):
                final_dict[field] = getattr(env_config, field)

        return cls(**final_dict) if final_dict else env_config
