"""Application service for fetching the upstream mods manifest."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from mindustry_mods.infrastructure.github_client import GitHubContentsClient
from mindustry_mods.infrastructure.token_store import TokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOptions:
    """Job flags. Accepted on the command line, not acted upon yet."""

    instant: bool = False
    push: bool = False
    hourly: bool = False
    clean: bool = False
    fast: bool = False
    path: Path = Path(".")


class FetcherService:
    """Service for fetching and decoding the upstream manifest file."""

    MANIFEST_OWNER = "Anuken"
    MANIFEST_REPO = "MindustryMods"
    MANIFEST_PATH = "mods.json"
    PREVIEW_LENGTH = 63

    def __init__(
        self,
        token_store: TokenStore,
        client_factory: Callable[[str], GitHubContentsClient] = GitHubContentsClient
    ):
        """
        Initialize fetcher service.

        Args:
            token_store: Source of the GitHub credential
            client_factory: Builds a contents client from the token
        """
        self.token_store = token_store
        self.client_factory = client_factory

    def run(self, options: Optional[FetchOptions] = None) -> Optional[str]:
        """
        Fetch the manifest once and decode it.

        Args:
            options: Job flags, currently only logged

        Returns:
            The decoded manifest text, or None when no token is configured
        """
        options = options or FetchOptions()
        logger.debug(f"Running with {options}")

        self.token_store.ensure_config_dir()
        token = self.token_store.read_token()
        if token is None:
            logger.info("Github token file not found.")
            return None

        client = self.client_factory(token)
        envelope = client.get_contents(self.MANIFEST_OWNER, self.MANIFEST_REPO, self.MANIFEST_PATH)
        logger.debug(f"Encoded content starts with {envelope.content[:self.PREVIEW_LENGTH]!r}")

        content = envelope.decode()
        logger.info(f"Decoded {self.MANIFEST_PATH} ({len(content)} characters)")
        return content
