"""
Configuration loader for the CertCentral client
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.digicert.com/services/v2/"
DEFAULT_AUTH_HEADER = "X-DC-DEVKEY"


class ClientConfig(BaseModel):
    """Settings shared by the sync and async clients"""

    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    auth_header: str = DEFAULT_AUTH_HEADER
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = "digicert-client/0.1"
    raise_on_error: bool = True


def load_client_config(config_path: Path) -> ClientConfig:
    """
    Load and validate client configuration from a YAML file

    Args:
        config_path: Path to a YAML mapping with ClientConfig keys

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = ClientConfig(**config_data)
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise


def config_from_env(env_file: Optional[Path] = None) -> ClientConfig:
    """Build a ClientConfig from DIGICERT_* environment variables (and a .env file)"""
    load_dotenv(dotenv_path=env_file)

    values = {"api_key": os.getenv("DIGICERT_API_KEY", "")}
    if os.getenv("DIGICERT_BASE_URL"):
        values["base_url"] = os.environ["DIGICERT_BASE_URL"]
    if os.getenv("DIGICERT_TIMEOUT_SECONDS"):
        values["timeout_seconds"] = os.environ["DIGICERT_TIMEOUT_SECONDS"]
    if os.getenv("DIGICERT_RAISE_ON_ERROR"):
        values["raise_on_error"] = os.environ["DIGICERT_RAISE_ON_ERROR"].lower() in ("1", "true", "yes")
    return ClientConfig(**values)
