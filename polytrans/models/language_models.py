"""Language handles and the case-insensitive dictionary that resolves codes, names and aliases to them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntFlag

__all__: list[str] = ["Language", "LanguageDictionary", "TranslationServices"]


class TranslationServices(IntFlag):
    """Services that can translate a language."""

    NONE = 0
    GOOGLE = 1 << 0
    BING = 1 << 1
    YANDEX = 1 << 2
    MICROSOFT = 1 << 3
    ALL = GOOGLE | BING | YANDEX | MICROSOFT


@dataclass(frozen=True)
class Language:
    """Canonical language handle.

    Two handles are equal when their ISO 639-1 codes are equal.

    Attributes:
        name (str): English name.
        native_name (str): Name in the language itself.
        iso6391 (str): ISO 639-1 code, or the service-specific code where none exists (e.g. 'zh-CN', 'yue').
        iso6393 (str): ISO 639-3 code.
        supported_services (TranslationServices): Services able to translate the language.
    """

    name: str = field(compare=False)
    native_name: str = field(compare=False)
    iso6391: str
    iso6393: str = field(compare=False)
    supported_services: TranslationServices = field(default=TranslationServices.ALL, compare=False)

    def is_service_supported(self, service: TranslationServices) -> bool:
        return (self.supported_services & service) == service

    def __str__(self) -> str:
        return self.iso6391


class LanguageDictionary(Mapping[str, Language]):
    """Read-only mapping from ISO 639-1 code to Language, with alias resolution.

    Lookups through ``[]`` accept canonical codes only; ``get_language`` and ``try_get_language`` additionally accept
    English names, native names, ISO 639-3 codes and the explicit aliases. All lookups ignore case.
    """

    def __init__(self, languages: Mapping[str, Language], aliases: Mapping[str, str] | None = None) -> None:
        self._languages: dict[str, Language] = {code.lower(): lang for code, lang in languages.items()}
        self._aliases: dict[str, str] = {}
        for code, lang in self._languages.items():
            self._aliases[lang.name.lower()] = code
            self._aliases[lang.native_name.lower()] = code
            self._aliases[lang.iso6393.lower()] = code
        # explicit aliases win over names
        for alias, code in (aliases or {}).items():
            self._aliases[alias.lower()] = code.lower()

        unknown: list[str] = [code for code in self._aliases.values() if code not in self._languages]
        if unknown:
            msg: str = f"Aliases point to unknown languages: {sorted(set(unknown))}"
            raise ValueError(msg)

    def __getitem__(self, code: str) -> Language:
        return self._languages[code.lower()]

    def __iter__(self) -> Iterator[str]:
        return (lang.iso6391 for lang in self._languages.values())

    def __len__(self) -> int:
        return len(self._languages)

    @property
    def aliases(self) -> Mapping[str, str]:
        """Lower-cased alias to lower-cased canonical code."""
        return self._aliases

    def try_get_language(self, code: str | None) -> Language | None:
        """Resolve a code, name or alias.

        Args:
            code (str | None): Free-form language designation.

        Returns:
            Language | None: The language, or None when the designation is empty or unknown.
        """
        if not code:
            return None
        key: str = code.strip().lower()
        lang: Language | None = self._languages.get(key)
        if lang is not None:
            return lang
        alias: str | None = self._aliases.get(key)
        if alias is None:
            return None
        return self._languages[alias]

    def get_language(self, code: str) -> Language:
        """Resolve a code, name or alias.

        Raises:
            KeyError: If the designation is unknown.
        """
        lang: Language | None = self.try_get_language(code)
        if lang is None:
            msg: str = f"Unknown language: '{code}'"
            raise KeyError(msg)
        return lang
