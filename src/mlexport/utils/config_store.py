import os
import json
import platform
from pathlib import Path
from typing import Any, Dict, Optional
import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from mlexport.constants import KEYRING_SERVICE, KEYRING_TOKEN_USER


class ConfigStore:
    def __init__(self):
        self.base_dir = self._get_config_dir()
        self.settings_file = self.base_dir / "settings.json"
        self._ensure_config_dir()

    def _get_config_dir(self) -> Path:
        """Get platform-specific config directory"""
        system = platform.system()
        if system == "Windows":
            base_dir = os.environ.get("APPDATA", "")
            return Path(base_dir) / "mlexport"
        elif system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "mlexport"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
            if xdg_config:
                return Path(xdg_config) / "mlexport"
            return Path.home() / ".mlexport"

    def _ensure_config_dir(self):
        """Ensure config directory exists"""
        os.makedirs(self.base_dir, exist_ok=True)

    def get_settings(self) -> Dict[str, Any]:
        """Get all stored settings"""
        if not self.settings_file.exists():
            return {}
        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                settings = json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
        return settings if isinstance(settings, dict) else {}

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a single setting"""
        return self.get_settings().get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Store a single setting"""
        settings = self.get_settings()
        settings[key] = value
        self._write_settings(settings)

    def unset_setting(self, key: str) -> bool:
        """Remove a setting; returns False if it was not set"""
        settings = self.get_settings()
        if key not in settings:
            return False
        del settings[key]
        self._write_settings(settings)
        return True

    def _write_settings(self, settings: Dict[str, Any]) -> None:
        with open(self.settings_file, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)

    def store_access_token(self, token: str) -> None:
        """Store the orders access token in the OS keyring"""
        keyring.set_password(KEYRING_SERVICE, KEYRING_TOKEN_USER, token)

    def get_access_token(self) -> Optional[str]:
        """Get the stored access token, if the keyring has one"""
        try:
            return keyring.get_password(KEYRING_SERVICE, KEYRING_TOKEN_USER)
        except KeyringError:
            return None

    def delete_access_token(self) -> bool:
        """Remove the stored access token; returns False if none was stored"""
        try:
            keyring.delete_password(KEYRING_SERVICE, KEYRING_TOKEN_USER)
            return True
        except PasswordDeleteError:
            return False
