"""Credentials cached by the backends' session managers."""

from __future__ import annotations

from dataclasses import dataclass

__all__: list[str] = ["BingCredentials"]


@dataclass(frozen=True)
class BingCredentials:
    """Credentials scraped from the Bing translator page.

    Attributes:
        token (str): Abuse prevention token sent with every request.
        key (int): Unix timestamp in milliseconds at which the page was generated.
        impression_guid (str): Locally generated impression id, 32 upper-case hex digits.
    """

    token: str
    key: int
    impression_guid: str

    @property
    def expires_at(self) -> float:
        """POSIX timestamp in seconds; credentials are valid for one hour after ``key``."""
        return (self.key + 3_600_000) / 1000
