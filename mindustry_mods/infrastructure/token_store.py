"""Per-user configuration directory and GitHub token file."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

APP_DIR_NAME = "mindustry-mods-backend"
TOKEN_FILE_NAME = "github-token"


class TokenStore:
    """Reads the GitHub credential from the per-user config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize token store.

        Args:
            config_dir: Config directory. If None, resolved from the environment.
        """
        if config_dir is None:
            config_dir = self.default_config_dir()
        self.config_dir = Path(config_dir)

    @staticmethod
    def default_config_dir() -> Path:
        override = os.getenv("MINDUSTRY_MODS_CONFIG_DIR")
        if override:
            return Path(override)

        xdg_home = os.getenv("XDG_CONFIG_HOME")
        base = Path(xdg_home) if xdg_home else Path.home() / ".config"
        return base / APP_DIR_NAME

    @property
    def token_path(self) -> Path:
        return self.config_dir / TOKEN_FILE_NAME

    def ensure_config_dir(self):
        """Create the config directory if it does not exist yet."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def read_token(self) -> Optional[str]:
        """
        Read the Authorization header value.

        Returns:
            The stripped token, or None if the file is missing or blank
        """
        try:
            token = self.token_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None

        if not token:
            logger.warning(f"Token file {self.token_path} is empty")
            return None
        return token
