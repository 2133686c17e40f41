"""Encoded file contents as returned by the GitHub contents API."""

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Dict


class ContentsError(Exception):
    """Base class for contents envelope failures."""
    pass


class ContentDecodeError(ContentsError):
    """Raised when the envelope body cannot be decoded to text."""
    pass


class UnsupportedEncodingError(ContentDecodeError):
    """Raised when the envelope declares an encoding other than base64."""
    pass


@dataclass(frozen=True)
class ContentsEnvelope:
    """Encoding tag plus encoded body of one repository file."""

    encoding: str
    content: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentsEnvelope":
        try:
            return cls(encoding=data["encoding"], content=data["content"])
        except (KeyError, TypeError) as e:
            raise ContentDecodeError(f"Malformed contents envelope: {e}") from e

    def decode(self) -> str:
        """
        Decode the body according to the declared encoding.

        Returns:
            Decoded UTF-8 text

        Raises:
            UnsupportedEncodingError: If the encoding is not base64
            ContentDecodeError: If the body is not valid base64 or not UTF-8
        """
        if self.encoding != "base64":
            raise UnsupportedEncodingError(f"Unsupported content encoding: {self.encoding!r}")

        # GitHub wraps the body every 60 characters
        body = self.content.replace("\n", "")
        try:
            raw = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ContentDecodeError(f"Invalid base64 content: {e}") from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ContentDecodeError(f"Decoded content is not UTF-8: {e}") from e
