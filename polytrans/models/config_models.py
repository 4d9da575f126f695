"""Configuration data models.

Each dataclass mirrors one section of the INI file; field names are the UPPERCASE option names.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Config",
    "Engine",
    "General",
    "Translation",
]


def _default_engines() -> list[str]:
    return ["google", "google2", "microsoft", "yandex", "bing"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""


@dataclass
class Translation:
    ENGINE: list[str] = field(default_factory=_default_engines)
    TIMEOUT: float = 10.0
    GOOGLE_SUFFIX: str = "com"


@dataclass
class Engine:
    """Per-backend overrides. Empty strings and a zero timeout mean "use the backend default"."""

    API_URL: str = ""
    USER_AGENT: str = ""
    TIMEOUT: float = 0.0


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    GOOGLE: Engine = field(default_factory=Engine)
    GOOGLE2: Engine = field(default_factory=Engine)
    MICROSOFT: Engine = field(default_factory=Engine)
    BING: Engine = field(default_factory=Engine)
    YANDEX: Engine = field(default_factory=Engine)
    DEEPL: Engine = field(default_factory=Engine)

    def engine_section(self, name: str) -> Engine:
        """Return the section of the named backend, or defaults when the backend has none."""
        section: Engine | None = getattr(self, name.upper(), None)
        if isinstance(section, Engine):
            return section
        return Engine()

    def engine_timeout(self, name: str) -> float:
        """Effective request timeout of the named backend in seconds."""
        timeout: float = self.engine_section(name).TIMEOUT
        return timeout if timeout > 0 else self.TRANSLATION.TIMEOUT
