"""Loading of the static listing data file."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import requests

from mindustry_mods.domain.mod import ListingFormatError, Mod

logger = logging.getLogger(__name__)

LISTING_DATA_PATH = "data/modmeta.1.0.json"


def parse_listing(data: Any) -> List[Mod]:
    """Turn a decoded JSON array into mods, keeping the server order."""
    if not isinstance(data, list):
        raise ListingFormatError(f"Listing data must be a JSON array, got {type(data).__name__}")
    return [Mod.from_dict(entry) for entry in data]


class ListingClient:
    """Fetches the listing data file from the published site."""

    TIMEOUT_SECONDS = 30

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    @property
    def data_url(self) -> str:
        return f"{self.base_url}/{LISTING_DATA_PATH}"

    def fetch_mods(self) -> List[Mod]:
        """
        GET the listing data file.

        Raises:
            requests.RequestException: On transport failures and non-2xx statuses
            ListingFormatError: If the body is not a valid mods array
        """
        logger.info(f"Fetching listing data from {self.data_url}")
        response = self.session.get(self.data_url, timeout=self.TIMEOUT_SECONDS)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise ListingFormatError(f"Listing data is not JSON: {e}") from e

        mods = parse_listing(data)
        logger.info(f"Loaded {len(mods)} mods")
        return mods


def load_listing_file(path) -> List[Mod]:
    """Read the listing data from a local JSON file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ListingFormatError(f"{path} is not valid JSON: {e}") from e
    return parse_listing(data)
