"""
Configuration Module
Suite settings resolved once at import, from secret files or the environment.
Invalid values fail fast so a misconfigured run never reaches collection.
"""
import os
import logging
from typing import Optional
from pathlib import Path
from urllib.parse import urlparse

logger = logging.getLogger("fakestore.config")

DEFAULT_BASE_URL = "https://fakestoreapi.com/"
LOG_ENVS = ("dev", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_secret(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Load a value from file (Docker/K8s secret) or environment.
    Priority:
    1. /run/secrets/{key_lower}
    2. Environment Variable {KEY}
    3. Default
    """
    secret_path = Path(f"/run/secrets/{key.lower()}")
    if secret_path.exists():
        try:
            return secret_path.read_text().strip()
        except OSError as e:
            logger.warning(f"Failed to read secret file {secret_path}: {e}")

    val = os.getenv(key)
    if val is not None:
        return val

    return default


def parse_base_url(raw: str) -> str:
    """Validate an http(s) base URL and make sure it ends with a slash."""
    parsed = urlparse(raw.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"FAKESTORE_BASE_URL must be an absolute http(s) URL, got {raw!r}")
    url = parsed.geturl()
    # urljoin drops the last path segment of a base without a trailing slash
    if not url.endswith("/"):
        url += "/"
    return url


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"FAKESTORE_TIMEOUT must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"FAKESTORE_TIMEOUT must be positive, got {value}")
    return value


def parse_log_env(raw: str) -> str:
    env = raw.strip().lower()
    if env not in LOG_ENVS:
        raise ValueError(f"LOG_ENV must be one of {LOG_ENVS}, got {raw!r}")
    return env


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got {raw!r}")
    return level


# --- Target API ---
BASE_URL = parse_base_url(get_secret("FAKESTORE_BASE_URL", DEFAULT_BASE_URL))
REQUEST_TIMEOUT = parse_timeout(get_secret("FAKESTORE_TIMEOUT"))

# --- Logging ---
LOG_ENV = parse_log_env(get_secret("LOG_ENV", "dev"))
LOG_LEVEL = parse_log_level(get_secret("LOG_LEVEL", "INFO"))
