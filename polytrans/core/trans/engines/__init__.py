"""Translation engine implementations.

Importing this package registers every backend with `TransInterface.registered` under its engine name.

Modules:
- base: HttpTransEngine, the shared base of the backends that own an `AsyncHttp` transport.
- trans_google: GoogleTranslation ('google'), the gtx endpoint with text-to-speech.
- trans_google2: Google2Translation ('google2'), the batchexecute RPC of the translate web app.
- trans_microsoft: MicrosoftTranslation ('microsoft'), signed requests and Azure text-to-speech.
- trans_bing: BingTranslation ('bing'), credentials scraped from the translator page.
- trans_yandex: YandexTranslation ('yandex'), the Android app API.
- trans_deepl: DeeplTranslation ('deepl'), the official DeepL client.
"""

from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.engines.trans_bing import BingTranslation
from polytrans.core.trans.engines.trans_deepl import DeeplTranslation
from polytrans.core.trans.engines.trans_google import GoogleTranslation
from polytrans.core.trans.engines.trans_google2 import Google2Translation
from polytrans.core.trans.engines.trans_microsoft import MicrosoftTranslation
from polytrans.core.trans.engines.trans_yandex import YandexTranslation

__all__: list[str] = [
    "BingTranslation",
    "DeeplTranslation",
    "Google2Translation",
    "GoogleTranslation",
    "HttpTransEngine",
    "MicrosoftTranslation",
    "YandexTranslation",
]
