"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULT_PRESETS = {
    "cost": {"cost": 70, "speed": 15, "compliance": 15},
    "speed": {"speed": 70, "cost": 15, "compliance": 15},
    "compliance": {"compliance": 70, "cost": 15, "speed": 15},
}


class Config:
    """Application configuration manager"""

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path or os.getenv("STAFFING_CONFIG", DEFAULT_CONFIG_PATH))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        return {}

    @property
    def database_url(self) -> str:
        return os.getenv("DATABASE_URL", self.get("database.url", ""))

    @property
    def reference_data_path(self) -> str:
        return os.getenv("STAFFING_REFERENCE_DATA", self.get("data.reference_path", "data/reference_data.yaml"))

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", self.get("logging.level", "INFO")).upper()

    @property
    def weight_presets(self) -> Dict[str, Dict[str, float]]:
        return self.get("matching.presets", DEFAULT_PRESETS)

    @property
    def default_preset(self) -> str:
        return self.get("matching.default_preset", "cost")

    @property
    def scoring(self) -> Dict[str, Any]:
        return self.get("scoring", {})

    @property
    def batch_max_workers(self) -> int:
        return self.get("performance.max_workers", 4)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

# Global config instance
config = Config()
