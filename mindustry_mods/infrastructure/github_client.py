"""GitHub REST contents API client."""

import logging
from typing import Optional, Dict
import requests

from mindustry_mods.domain.contents import ContentsEnvelope

logger = logging.getLogger(__name__)


class RateLimitExceeded(Exception):
    """Raised when GitHub API rate limit is exceeded."""
    pass


class AuthenticationError(Exception):
    """Raised when GitHub rejects the configured token."""
    pass


class GitHubContentsClient:
    """Client for the GitHub repository contents endpoint."""

    API_ROOT = "https://api.github.com"
    USER_AGENT = "Mindustry-Mods-Backend"
    TIMEOUT_SECONDS = 30

    def __init__(self, token: str, session: Optional[requests.Session] = None):
        """
        Initialize GitHub contents client.

        Args:
            token: Literal value of the Authorization header (e.g. "token abc123")
            session: Optional requests session, mostly for tests
        """
        self.token = token
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {
            "Authorization": self.token,
            "User-Agent": self.USER_AGENT,
        }

    def contents_url(self, owner: str, repo: str, path: str) -> str:
        return f"{self.API_ROOT}/repos/{owner}/{repo}/contents/{path}"

    def get_contents(self, owner: str, repo: str, path: str) -> ContentsEnvelope:
        """
        Fetch the metadata of one repository file.

        Args:
            owner: Repository owner
            repo: Repository name
            path: File path inside the repository

        Returns:
            The encoded contents envelope

        Raises:
            AuthenticationError: If the token is rejected
            RateLimitExceeded: If the rate limit is exhausted
            requests.RequestException: On transport failures and other error statuses
        """
        url = self.contents_url(owner, repo, path)
        logger.info(f"Fetching {owner}/{repo}/{path}")

        response = self.session.get(url, headers=self.headers, timeout=self.TIMEOUT_SECONDS)

        if response.status_code == 401:
            raise AuthenticationError("Authentication failed. Check your GitHub token.")
        elif response.status_code == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                raise RateLimitExceeded(
                    f"Rate limit exceeded, resets at {response.headers.get('X-RateLimit-Reset')}"
                )
            raise requests.HTTPError(f"Forbidden: {response.text}", response=response)

        response.raise_for_status()
        return ContentsEnvelope.from_dict(response.json())
