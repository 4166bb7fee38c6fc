import yaml
import os
from typing import List, Dict, Any, Literal
from pydantic import BaseModel, Field, ValidationError, field_validator

from core.exceptions import ConfigurationError

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class AuthConfig(BaseModel):
    """
    Credential verification settings.

    The secret is process-wide and read-only once the service has started.
    """
    jwt_secret: str = Field(..., min_length=1)
    algorithms: List[str] = Field(default_factory=lambda: list(HMAC_ALGORITHMS))
    leeway_seconds: int = Field(default=0, ge=0)  # clock skew tolerance for exp/nbf/iat

    @field_validator("algorithms")
    @classmethod
    def _only_hmac(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one signing algorithm is required")
        rejected = [alg for alg in value if alg not in HMAC_ALGORITHMS]
        if rejected:
            raise ValueError(f"only HMAC algorithms are supported, got {rejected}")
        return value


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 9090
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AppConfig(BaseModel):
    auth: AuthConfig
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_yaml(config_path: str) -> Dict[str, Any]:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")
        if not os.path.exists(config_path):
            return {}

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    env_secret = os.environ.get("JWT_SECRET")
    if env_secret:
        if data.get('auth') is None:
            data['auth'] = {}
        data['auth']['jwt_secret'] = env_secret

    env_host = os.environ.get("WEB_HOST")
    if env_host:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['host'] = env_host

    # GO_SCORING_SERVICE_PORT is the name older deployments use
    env_port = os.environ.get("SCORING_SERVICE_PORT") or os.environ.get("GO_SCORING_SERVICE_PORT")
    if env_port:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['port'] = env_port

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if data.get('logging') is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level.upper()

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """
    Load configuration from YAML and apply environment variable overrides.

    Raises:
        ConfigurationError: if no signing secret is configured or any value is invalid.
    """
    data = _apply_env_overrides(_read_yaml(config_path))
    # Empty YAML sections fall back to their defaults
    data = {key: value for key, value in data.items() if value is not None}

    auth = data.get('auth') or {}
    if not auth.get('jwt_secret'):
        raise ConfigurationError("JWT_SECRET environment variable is required")

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
