"""Configuration management for mite tools."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir

from .api.client import DEFAULT_USER_AGENT

APP_NAME = "mite-tools"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
CREDENTIALS_FILE = CONFIG_DIR / "credentials.yaml"


@dataclass
class Credentials:
    """Account name and API key as stored on disk."""

    account: str
    api_key: str

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {"account": self.account, "api_key": self.api_key}

    @classmethod
    def from_dict(cls, data: dict) -> "Credentials":
        """Create from dictionary."""
        return cls(account=str(data["account"]), api_key=str(data["api_key"]))


@dataclass
class Config:
    """Application configuration."""

    account: str
    api_key: str
    user_agent: str = DEFAULT_USER_AGENT


def ensure_config_dir() -> None:
    """Ensure the configuration directory exists."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_env_config() -> tuple[Optional[str], Optional[str], Optional[str]]:
    """Load account, API key and user agent from the environment / .env file."""
    load_dotenv()

    return (
        os.getenv("MITE_ACCOUNT"),
        os.getenv("MITE_API_KEY"),
        os.getenv("MITE_USER_AGENT"),
    )


def load_credentials() -> Optional[Credentials]:
    """Load stored credentials from config directory."""
    if not CREDENTIALS_FILE.exists():
        return None

    try:
        with open(CREDENTIALS_FILE) as f:
            data = yaml.safe_load(f) or {}
        return Credentials.from_dict(data)
    except (yaml.YAMLError, KeyError):
        return None


def save_credentials(credentials: Credentials) -> None:
    """Save credentials to config directory, readable by the owner only."""
    ensure_config_dir()
    with open(CREDENTIALS_FILE, "w") as f:
        yaml.safe_dump(credentials.to_dict(), f, default_flow_style=False)
    CREDENTIALS_FILE.chmod(0o600)


def delete_credentials() -> None:
    """Remove stored credentials."""
    if CREDENTIALS_FILE.exists():
        CREDENTIALS_FILE.unlink()


def load_config() -> Config:
    """Load complete application configuration.

    Environment variables take precedence over stored credentials.
    """
    env_account, env_api_key, env_user_agent = load_env_config()
    stored = load_credentials()

    account = env_account or (stored.account if stored else None)
    api_key = env_api_key or (stored.api_key if stored else None)

    if not account or not api_key:
        raise ValueError(
            "Missing mite account or API key. Set MITE_ACCOUNT and MITE_API_KEY "
            "or run 'mite auth login'"
        )

    return Config(
        account=account,
        api_key=api_key,
        user_agent=env_user_agent or DEFAULT_USER_AGENT,
    )
