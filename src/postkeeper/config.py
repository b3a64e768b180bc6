from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str
    port: int
    debug: bool
    token_secret_key: str  # Signing key for bearer tokens, loaded once at startup
    token_ttl_seconds: int = 3600
    bcrypt_rounds: int = 10
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "POSTKEEPER_",
        "extra": "ignore",
    }
