"""
Centralized configuration for the SMS Sender service.

- Pure Python dataclass, no Pydantic settings.
- Loads from OS env; a .env file at the repo root is applied first (python-dotenv).
- Strong typing & validation in __post_init__.
- Immutable singleton via functools.lru_cache.
- Connection URLs never logged in full (masked).
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, cast
from urllib.parse import urlparse

from dotenv import load_dotenv

from shared.infrastructure.observability.logger import get_logger


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _mask_url(value: Optional[str]) -> str:
    if not value:
        return "<unset>"
    parsed = urlparse(value)
    if parsed.password:
        return value.replace(parsed.password, "***")
    return value


def _get_env_str(env: dict[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    v = env.get(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_env_bool(env: dict[str, str], key: str, default: bool = False) -> bool:
    v = env.get(key)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _get_env_int(env: dict[str, str], key: str, default: int) -> int:
    v = env.get(key)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"Env var {key} must be an integer")


def _get_env_float(env: dict[str, str], key: str, default: float) -> float:
    v = env.get(key)
    if v is None or v.strip() == "":
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"Env var {key} must be a number")


def _validate_choice(value: str, *, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ValueError(f"{key} must be one of {choices}, got {value!r}")
    return value


def _validate_url(value: Optional[str], *, key: str, allowed_schemes: tuple[str, ...]) -> Optional[str]:
    if value in (None, ""):
        return None
    parsed = urlparse(value)
    if parsed.scheme not in allowed_schemes or not parsed.netloc:
        raise ValueError(f"{key} must be a valid URL with scheme in {allowed_schemes}")
    return value


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
EnvName = Literal["local", "dev", "staging", "prod"]
BlockListBackend = Literal["redis", "memory"]


@dataclass(frozen=True)
class Settings:
    # Environment
    environment: EnvName = "local"
    debug: bool = False
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # Observability
    log_level: str = "INFO"
    json_logs: bool = True

    # Redis (block list store)
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout: float = 2.0
    redis_max_connections: int = 50
    blocklist_backend: BlockListBackend = "redis"
    blocklist_key: str = "sms:blocklist"

    # Kafka (delivery events)
    kafka_bootstrap_servers: str = "localhost:9092"
    kafka_topic: str = "sms.events"
    kafka_client_id: str = "sms-sender"
    kafka_acks: str = "all"
    kafka_delivery_timeout_ms: int = 30_000
    kafka_send_timeout_seconds: float = 35.0

    # Derived/computed flags (filled in __post_init__)
    is_prod: bool = field(init=False)
    is_local: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "environment",
            _validate_choice(self.environment, choices=("local", "dev", "staging", "prod"), key="ENVIRONMENT"),
        )
        object.__setattr__(
            self, "blocklist_backend",
            _validate_choice(self.blocklist_backend, choices=("redis", "memory"), key="BLOCKLIST_BACKEND"),
        )
        object.__setattr__(
            self, "kafka_acks",
            _validate_choice(self.kafka_acks, choices=("0", "1", "all", "-1"), key="KAFKA_ACKS"),
        )

        _validate_url(self.redis_url, key="REDIS_URL", allowed_schemes=("redis", "rediss"))

        if not self.blocklist_key.strip():
            raise ValueError("APP_REDIS_BLOCKLIST_KEY must be non-empty")
        if not self.kafka_topic.strip():
            raise ValueError("KAFKA_TOPIC must be non-empty")
        if not self.kafka_bootstrap_servers.strip():
            raise ValueError("KAFKA_BOOTSTRAP_SERVERS must be non-empty")

        if self.kafka_delivery_timeout_ms <= 0:
            raise ValueError("KAFKA_DELIVERY_TIMEOUT_MS must be > 0")
        # Caller wait must outlast the producer delivery timeout.
        if self.kafka_send_timeout_seconds * 1000 <= self.kafka_delivery_timeout_ms:
            raise ValueError("KAFKA_SEND_TIMEOUT_SECONDS must exceed KAFKA_DELIVERY_TIMEOUT_MS")
        if self.redis_socket_timeout <= 0:
            raise ValueError("REDIS_SOCKET_TIMEOUT must be > 0")

        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")

        env = self.environment
        object.__setattr__(self, "is_prod", env == "prod")
        object.__setattr__(self, "is_local", env == "local")

    def kafka_producer_config(self) -> dict[str, object]:
        """librdkafka configuration for the delivery-event producer."""
        return {
            "bootstrap.servers": self.kafka_bootstrap_servers,
            "client.id": self.kafka_client_id,
            "acks": self.kafka_acks,
            "enable.idempotence": self.kafka_acks in ("all", "-1"),
            "delivery.timeout.ms": self.kafka_delivery_timeout_ms,
        }

    # Safe dict (for debug prints without secrets)
    def safe_dict(self) -> dict:
        return {
            "environment": self.environment,
            "debug": self.debug,
            "server_port": self.server_port,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "redis_url": _mask_url(self.redis_url),
            "blocklist_backend": self.blocklist_backend,
            "blocklist_key": self.blocklist_key,
            "kafka_bootstrap_servers": self.kafka_bootstrap_servers,
            "kafka_topic": self.kafka_topic,
            "kafka_client_id": self.kafka_client_id,
            "kafka_acks": self.kafka_acks,
            "kafka_delivery_timeout_ms": self.kafka_delivery_timeout_ms,
            "kafka_send_timeout_seconds": self.kafka_send_timeout_seconds,
        }


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
_logger = get_logger(__name__)


def load_settings(env: dict[str, str]) -> Settings:
    """Build Settings from a mapping of environment variables."""
    return Settings(
        environment=cast(EnvName, _get_env_str(env, "ENVIRONMENT", "local")),
        debug=_get_env_bool(env, "DEBUG", False),
        server_host=_get_env_str(env, "SERVER_HOST", "0.0.0.0") or "0.0.0.0",
        server_port=_get_env_int(env, "SERVER_PORT", 8080),
        log_level=_get_env_str(env, "LOG_LEVEL", "INFO") or "INFO",
        json_logs=_get_env_bool(env, "JSON_LOGS", True),
        redis_url=_get_env_str(env, "REDIS_URL", "redis://localhost:6379/0") or "",
        redis_socket_timeout=_get_env_float(env, "REDIS_SOCKET_TIMEOUT", 2.0),
        redis_max_connections=_get_env_int(env, "REDIS_MAX_CONNECTIONS", 50),
        blocklist_backend=cast(BlockListBackend, _get_env_str(env, "BLOCKLIST_BACKEND", "redis")),
        blocklist_key=_get_env_str(env, "APP_REDIS_BLOCKLIST_KEY", "sms:blocklist") or "",
        kafka_bootstrap_servers=_get_env_str(env, "KAFKA_BOOTSTRAP_SERVERS", "localhost:9092") or "",
        kafka_topic=_get_env_str(env, "KAFKA_TOPIC", "sms.events") or "",
        kafka_client_id=_get_env_str(env, "KAFKA_CLIENT_ID", "sms-sender") or "sms-sender",
        kafka_acks=_get_env_str(env, "KAFKA_ACKS", "all") or "all",
        kafka_delivery_timeout_ms=_get_env_int(env, "KAFKA_DELIVERY_TIMEOUT_MS", 30_000),
        kafka_send_timeout_seconds=_get_env_float(env, "KAFKA_SEND_TIMEOUT_SECONDS", 35.0),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Attempt to load .env from repo root (../../.env relative to src/shared/)
    env_file = Path(__file__).resolve().parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(dotenv_path=str(env_file), override=False)

    settings = load_settings(dict(os.environ))
    _logger.info("Settings loaded", extra={"settings": settings.safe_dict()})
    return settings
