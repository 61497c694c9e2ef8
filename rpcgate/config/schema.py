"""Configuration schema using Pydantic.

Single data model and defaults for rpcgate, persisted to ~/.rpcgate/config.json.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 18800
    path: str = "/rpc"  # Route the JSON-RPC handler is mounted on
    log_level: str = "info"  # uvicorn log level


class RpcConfig(BaseModel):
    """Dispatcher transport policy."""
    # Declared acceptable request content types.
    accept: list[str] = Field(default_factory=lambda: ["application/json", "text/json"])
    # When false the accept list is declared but not applied.
    enforce_content_type: bool = False


class LoggingConfig(BaseModel):
    """Loguru sink configuration."""
    level: str = "INFO"
    file_enabled: bool = True


class Config(BaseSettings):
    """Root configuration for rpcgate."""
    model_config = SettingsConfigDict(env_prefix="RPCGATE_", env_nested_delimiter="__")

    server: ServerConfig = Field(default_factory=ServerConfig)
    rpc: RpcConfig = Field(default_factory=RpcConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
