import logging
import os
from typing import Dict, Any, Optional

import yaml
from dotenv import load_dotenv

ENV_SECRETS = {
    ("tts", "elevenlabs", "api_key"): "ELEVENLABS_API_KEY",
    ("tts", "google_tts", "credentials_path"): "GOOGLE_APPLICATION_CREDENTIALS",
    ("spotify", "access_token"): "SPOTIFY_ACCESS_TOKEN",
    ("spotify", "device_id"): "SPOTIFY_DEVICE_ID",
}


def load_config(config_path: str) -> Dict[str, Any]:
    logger = logging.getLogger(__name__)

    if not os.path.exists(config_path):
        logger.error(f"Configuration file not found: {config_path}")
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        logger.info(f"Loaded configuration from {config_path}")
        return config
    except yaml.YAMLError as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise


def get_env_config(env_name: str = None, config_dir: str = "config/environments") -> Dict[str, Any]:
    logger = logging.getLogger(__name__)

    if not env_name:
        env_name = os.environ.get('DJ_AGENT_ENV', 'development')

    env_config_path = os.path.join(config_dir, f"{env_name}.yaml")

    if os.path.exists(env_config_path):
        try:
            with open(env_config_path, 'r', encoding='utf-8') as f:
                env_config = yaml.safe_load(f) or {}

            logger.info(f"Loaded environment configuration for {env_name}")
            return env_config
        except yaml.YAMLError as e:
            logger.warning(f"Error loading environment configuration for {env_name}: {e}")
            return {}
    else:
        logger.debug(f"No environment configuration found for {env_name}")
        return {}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_env_secrets(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill secrets that are absent from the YAML from the process environment."""
    load_dotenv()
    for path, env_var in ENV_SECRETS.items():
        value = os.getenv(env_var)
        if not value:
            continue
        section = config
        for key in path[:-1]:
            section = section.setdefault(key, {})
        if not section.get(path[-1]):
            section[path[-1]] = value
    return config


def get_merged_config(config_path: str, env_name: str = None) -> Dict[str, Any]:
    config = load_config(config_path)
    env_dir = os.path.join(os.path.dirname(os.path.abspath(config_path)), "config", "environments")
    config = deep_merge(config, get_env_config(env_name, env_dir))
    return apply_env_secrets(config)


def get_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) if isinstance(config, dict) else None
    return section if isinstance(section, dict) else {}


def get_value(config: Dict[str, Any], path: str, default: Optional[Any] = None) -> Any:
    current = config
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
