from __future__ import annotations

import base64
from typing import Final

__all__: list[str] = ["StringUtils"]

TTS_CHUNK_LENGTH: Final[int] = 200
LOG_PREVIEW_LENGTH: Final[int] = 50


class StringUtils:
    """Static helpers for the text handling shared by the backends."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Return the value as a string, or an empty string for None.

        Whitespace is preserved.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def compress_blanks(value: str) -> str:
        """Collapse every run of whitespace into one space and strip both ends."""
        return " ".join(StringUtils.ensure_str(value).split())

    @staticmethod
    def preview(value: str | None, limit: int = LOG_PREVIEW_LENGTH) -> str:
        """Shorten a text for log output.

        Args:
            value (str | None): Text to shorten.
            limit (int): Maximum number of characters kept.

        Returns:
            str: The text, cut to ``limit`` characters with a trailing ellipsis when it was longer.
        """
        text: str = StringUtils.ensure_str(value).replace("\n", "\\n")
        if len(text) > limit:
            return f"{text[:limit]}..."
        return text

    @staticmethod
    def split_without_word_breaking(text: str, max_length: int = TTS_CHUNK_LENGTH) -> list[str]:
        """Split a text into chunks of at most ``max_length`` characters, cutting at spaces where possible.

        Whitespace runs (tabs, new lines) are normalised to single spaces first. A single word longer than
        ``max_length`` is cut hard.

        Args:
            text (str): Text to split.
            max_length (int): Maximum chunk length.

        Returns:
            list[str]: The chunks in order. Empty for blank input.
        """
        text = StringUtils.compress_blanks(text)
        chunks: list[str] = []
        offset: int = 0
        while offset < len(text):
            if len(text) - offset <= max_length:
                chunks.append(text[offset:])
                break

            index: int = text.rfind(" ", offset, offset + max_length + 1)
            if index <= offset:
                chunks.append(text[offset : offset + max_length])
                offset += max_length
            else:
                chunks.append(text[offset:index])
                offset = index + 1
        return chunks

    @staticmethod
    def base64url_decode(value: str) -> bytes:
        """Decode unpadded base64url, as used in JWT segments.

        Raises:
            ValueError: If the value is not valid base64url.
        """
        padding: int = -len(value) % 4
        return base64.urlsafe_b64decode(value + "=" * padding)

    @staticmethod
    def escape_xml(value: str) -> str:
        """Escape the characters that are not allowed in SSML text nodes."""
        return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
