"""Voice models for the Microsoft neural text-to-speech voices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["DEFAULT_VOICES", "MicrosoftVoice"]


@dataclass_json(letter_case=LetterCase.PASCAL)
@dataclass(frozen=True)
class MicrosoftVoice(DataClassJsonMixin):
    """A neural voice as listed by the Azure speech service.

    Attributes:
        display_name (str): Human-readable name, e.g. 'Aria'.
        short_name (str): Voice identifier used in SSML, e.g. 'en-US-AriaNeural'.
        gender (str): 'Female' or 'Male'.
        locale (str): BCP 47 locale of the voice.
    """

    display_name: str
    short_name: str
    gender: str
    locale: str

    def __str__(self) -> str:
        return f"DisplayName: '{self.display_name}', Locale: '{self.locale}'"

    def to_ssml(self, text: str, rate: float = 1.0) -> str:
        """Wrap already escaped text in an SSML document spoken by this voice."""
        return (
            f"<speak version='1.0' xml:lang='{self.locale}'>"
            f"<voice xml:lang='{self.locale}' xml:gender='{self.gender}' name='{self.short_name}'>"
            f"<prosody rate='{rate:g}'>{text}</prosody></voice></speak>"
        )


DEFAULT_VOICES: Final[dict[str, MicrosoftVoice]] = {
    "ar": MicrosoftVoice("Hamed", "ar-SA-HamedNeural", "Male", "ar-SA"),
    "bg": MicrosoftVoice("Borislav", "bg-BG-BorislavNeural", "Male", "bg-BG"),
    "ca": MicrosoftVoice("Joana", "ca-ES-JoanaNeural", "Female", "ca-ES"),
    "cs": MicrosoftVoice("Antonin", "cs-CZ-AntoninNeural", "Male", "cs-CZ"),
    "da": MicrosoftVoice("Christel", "da-DK-ChristelNeural", "Female", "da-DK"),
    "de": MicrosoftVoice("Katja", "de-DE-KatjaNeural", "Female", "de-DE"),
    "el": MicrosoftVoice("Nestoras", "el-GR-NestorasNeural", "Male", "el-GR"),
    "en": MicrosoftVoice("Aria", "en-US-AriaNeural", "Female", "en-US"),
    "es": MicrosoftVoice("Elvira", "es-ES-ElviraNeural", "Female", "es-ES"),
    "fi": MicrosoftVoice("Noora", "fi-FI-NooraNeural", "Female", "fi-FI"),
    "fr": MicrosoftVoice("Denise", "fr-FR-DeniseNeural", "Female", "fr-FR"),
    "fr-CA": MicrosoftVoice("Sylvie", "fr-CA-SylvieNeural", "Female", "fr-CA"),
    "he": MicrosoftVoice("Avri", "he-IL-AvriNeural", "Male", "he-IL"),
    "hi": MicrosoftVoice("Swara", "hi-IN-SwaraNeural", "Female", "hi-IN"),
    "hr": MicrosoftVoice("Srecko", "hr-HR-SreckoNeural", "Male", "hr-HR"),
    "hu": MicrosoftVoice("Tamas", "hu-HU-TamasNeural", "Male", "hu-HU"),
    "id": MicrosoftVoice("Ardi", "id-ID-ArdiNeural", "Male", "id-ID"),
    "it": MicrosoftVoice("Diego", "it-IT-DiegoNeural", "Male", "it-IT"),
    "ja": MicrosoftVoice("Nanami", "ja-JP-NanamiNeural", "Female", "ja-JP"),
    "ko": MicrosoftVoice("SunHi", "ko-KR-SunHiNeural", "Female", "ko-KR"),
    "ms": MicrosoftVoice("Osman", "ms-MY-OsmanNeural", "Male", "ms-MY"),
    "nl": MicrosoftVoice("Colette", "nl-NL-ColetteNeural", "Female", "nl-NL"),
    "no": MicrosoftVoice("Pernille", "nb-NO-PernilleNeural", "Female", "nb-NO"),
    "pl": MicrosoftVoice("Zofia", "pl-PL-ZofiaNeural", "Female", "pl-PL"),
    "pt": MicrosoftVoice("Francisca", "pt-BR-FranciscaNeural", "Female", "pt-BR"),
    "pt-PT": MicrosoftVoice("Fernanda", "pt-PT-FernandaNeural", "Female", "pt-PT"),
    "ro": MicrosoftVoice("Emil", "ro-RO-EmilNeural", "Male", "ro-RO"),
    "ru": MicrosoftVoice("Dariya", "ru-RU-DariyaNeural", "Female", "ru-RU"),
    "sk": MicrosoftVoice("Lukas", "sk-SK-LukasNeural", "Male", "sk-SK"),
    "sl": MicrosoftVoice("Rok", "sl-SI-RokNeural", "Male", "sl-SI"),
    "sv": MicrosoftVoice("Sofie", "sv-SE-SofieNeural", "Female", "sv-SE"),
    "ta": MicrosoftVoice("Pallavi", "ta-IN-PallaviNeural", "Female", "ta-IN"),
    "te": MicrosoftVoice("Shruti", "te-IN-ShrutiNeural", "Male", "te-IN"),
    "th": MicrosoftVoice("Niwat", "th-TH-NiwatNeural", "Male", "th-TH"),
    "tr": MicrosoftVoice("Emel", "tr-TR-EmelNeural", "Female", "tr-TR"),
    "vi": MicrosoftVoice("NamMinh", "vi-VN-NamMinhNeural", "Male", "vi-VN"),
    "zh-CN": MicrosoftVoice("Xiaoxiao", "zh-CN-XiaoxiaoNeural", "Female", "zh-CN"),
    "zh-TW": MicrosoftVoice("Xiaoxiao", "zh-CN-XiaoxiaoNeural", "Female", "zh-CN"),
    "yue": MicrosoftVoice("HiuGaai", "zh-HK-HiuGaaiNeural", "Female", "zh-HK"),
}
