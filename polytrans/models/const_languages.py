"""Static table of the languages known to the translation backends.

Codes follow ISO 639-1 where one exists; otherwise the code used by the services (e.g. 'zh-CN', 'yue', 'tlh').
"""

from __future__ import annotations

from typing import Final

from polytrans.models.language_models import Language, LanguageDictionary, TranslationServices

__all__: list[str] = ["LANGUAGES", "LANGUAGE_ALIASES", "LANGUAGE_DICTIONARY"]

_G: Final[TranslationServices] = TranslationServices.GOOGLE
_B: Final[TranslationServices] = TranslationServices.BING
_Y: Final[TranslationServices] = TranslationServices.YANDEX
_M: Final[TranslationServices] = TranslationServices.MICROSOFT

LANGUAGES: Final[dict[str, Language]] = {
    "aa": Language("Afar", "Qafaraf", "aa", "aar", _G),
    "ab": Language("Abkhaz", "Аԥсуа бызшәа", "ab", "abk", _G),
    "ace": Language("Acehnese", "بهسا اچيه", "ace", "ace", _G),
    "ach": Language("Acholi", "Lwo", "ach", "ach", _G),
    "af": Language("Afrikaans", "Afrikaans", "af", "afr"),
    "ak": Language("Akan", "Ákán", "ak", "aka", _G),
    "alz": Language("Alur", "Dho-Alur", "alz", "alz", _G),
    "am": Language("Amharic", "አማርኛ", "am", "amh"),
    "ar": Language("Arabic", "العربية", "ar", "ara"),
    "as": Language("Assamese", "অসমীয়া", "as", "asm", _G | _B | _M),
    "av": Language("Avar", "Магӏарул мацӏ", "av", "ava", _G),
    "awa": Language("Awadhi", "अवधी", "awa", "awa", _G),
    "ay": Language("Aymara", "Aymar aru", "ay", "aym", _G),
    "az": Language("Azerbaijani", "Azərbaycan", "az", "aze"),
    "ba": Language("Bashkir", "Bashkir", "ba", "bak"),
    "bal": Language("Baluchi", "بلۏچی", "bal", "bal", _G),
    "ban": Language("Balinese", "Basa Bali", "ban", "ban", _G),
    "bbc": Language("Batak Toba", "Hata Batak Toba", "bbc", "bbc", _G),
    "bci": Language("Baoulé", "Baule", "bci", "bci", _G),
    "be": Language("Belarusian", "беларуская", "be", "bel", _G | _Y),
    "bem": Language("Bemba", "Chibemba", "bem", "bem", _G),
    "ber": Language("Berber", "ⵜⴰⵎⴰⵣⵉⵖⵜ", "ber", "ber", _G),
    "ber-Latn": Language("Berber (Latin)", "Tamaziɣt (Talatinit)", "ber-Latn", "ber-Latn", _G),
    "bew": Language("Betawi", "Bahasa Betawi", "bew", "bew", _G),
    "bg": Language("Bulgarian", "Български", "bg", "bul"),
    "bho": Language("Bhojpuri", "भोजपुरी", "bho", "bho", _G | _B | _M),
    "bm": Language("Bambara", "Bamanankan", "bm", "bam", _G),
    "bik": Language("Bikol", "Bikol", "bik", "bik", _G),
    "bn": Language("Bengali", "বাংলা", "bn", "ben"),
    "bo": Language("Tibetan", "བོད་སྐད་", "bo", "bod", _G | _B | _M),
    "br": Language("Breton", "brezhoneg", "br", "bre", _G),
    "brx": Language("Bodo", "बड़ो", "brx", "brx", _B | _M),
    "bs": Language("Bosnian", "bosanski", "bs", "bos"),
    "bts": Language("Batak Simalungun", "Sahap Simalungun", "bts", "bts", _G),
    "btx": Language("Batak Karo", "Cakap Karo", "btx", "btx", _G),
    "bua": Language("Buryat", "буряад хэлэн", "bua", "bua", _G),
    "ca": Language("Catalan", "Català", "ca", "cat"),
    "ce": Language("Chechen", "Нохчийн мотт", "ce", "che", _G),
    "ceb": Language("Cebuano", "Binisaya", "ceb", "ceb", _G | _Y),
    "cgg": Language("Kiga", "Chiga", "cgg", "cgg", _G),
    "ch": Language("Chamorro", "Finuʼ Chamoru", "ch", "cha", _G),
    "chk": Language("Chuukese", "Chuuk", "chk", "chk", _G),
    "chm": Language("Mari", "марий йылме", "chm", "chm", _G),
    "ckb": Language("Kurdish (Central)", "کوردیی ناوەندی", "ckb", "ckb", _G),
    "cnh": Language("Hakha Chin", "Laiholh", "cnh", "cnh", _G),
    "co": Language("Corsican", "Corsu", "co", "cos", _G),
    "crh": Language("Crimean Tatar", "Къырымтатар тили", "crh", "crh", _G),
    "crh-Latn": Language("Crimean Tatar (Latin)", "qırımtatar tili", "crh-Latn", "crh-Latn", _G),
    "crs": Language("Seychellois Creole", "Seselwa", "crs", "crs", _G),
    "cs": Language("Czech", "Čeština", "cs", "ces"),
    "cv": Language("Chuvash", "Чӑвашла", "cv", "chv", _G | _Y),
    "cy": Language("Welsh", "Cymraeg", "cy", "cym"),
    "da": Language("Danish", "Dansk", "da", "dan"),
    "de": Language("German", "Deutsch", "de", "deu"),
    "din": Language("Dinka", "Thuɔŋjäŋ", "din", "din", _G),
    "doi": Language("Dogri", "डोगरी", "doi", "doi", _G | _B | _M),
    "dov": Language("Dombe", "Dombe", "dov", "dov", _G),
    "dsb": Language("Lower Sorbian", "Dolnoserbšćina", "dsb", "dsb", _B | _M),
    "dv": Language("Divehi", "ދިވެހިބަސް", "dv", "div", _G | _B | _M),
    "dyu": Language("Dyula", "Julakan", "dyu", "dyu", _G),
    "dz": Language("Dzongkha", "རྫོང་ཁ་", "dz", "dzo", _G),
    "ee": Language("Ewe", "Eʋegbe", "ee", "ewe", _G),
    "el": Language("Greek", "Ελληνικά", "el", "ell"),
    "emj": Language("Emoji", "Emoji", "emj", "emj", _Y),
    "en": Language("English", "English", "en", "eng"),
    "eo": Language("Esperanto", "Esperanto", "eo", "epo", _G | _Y),
    "es": Language("Spanish", "Español", "es", "spa"),
    "et": Language("Estonian", "Eesti", "et", "est"),
    "eu": Language("Basque", "Euskara", "eu", "eus"),
    "fa": Language("Persian", "فارسی", "fa", "fas"),
    "ff": Language("Fula", "Fulfulde", "ff", "ful", _G),
    "fi": Language("Finnish", "Suomi", "fi", "fin"),
    "fil": Language("Filipino", "Filipino", "fil", "fil", _B | _M),
    "fj": Language("Fijian", "Na Vosa Vakaviti", "fj", "fij", _G | _B | _M),
    "fo": Language("Faroese", "føroyskt mál", "fo", "fao", _G | _B | _M),
    "fon": Language("Fon", "Fɔngbè", "fon", "fon", _G),
    "fr": Language("French", "Français", "fr", "fra"),
    "fr-CA": Language("French (Canada)", "Français (Canada)", "fr-CA", "fr-CA", _G | _B | _M),
    "fur": Language("Friulian", "furlan", "fur", "fur", _G),
    "fy": Language("Frisian", "Frysk", "fy", "fry", _G),
    "ga": Language("Irish", "Gaeilge", "ga", "gle"),
    "gaa": Language("Ga", "Gã", "gaa", "gaa", _G),
    "gd": Language("Scottish Gaelic", "Gàidhlig", "gd", "gla", _G | _Y),
    "gl": Language("Galician", "Galego", "gl", "glg"),
    "gn": Language("Guarani", "avañeʼẽ", "gn", "grn", _G),
    "gom": Language("Goan Konkani", "कोंकणी", "gom", "gom", _G | _B | _M),
    "gu": Language("Gujarati", "ગુજરાતી", "gu", "guj"),
    "gv": Language("Manx", "Gaelg", "gv", "glv", _G),
    "ha": Language("Hausa", "Hausa", "ha", "hau", _G | _B | _M),
    "haw": Language("Hawaiian", "ʻŌlelo Hawaiʻi", "haw", "haw", _G),
    "he": Language("Hebrew", "עברית", "he", "heb"),
    "hi": Language("Hindi", "हिन्दी", "hi", "hin"),
    "hil": Language("Hiligaynon", "Ilonggo", "hil", "hil", _G),
    "hmn": Language("Hmong", "Hmong", "hmn", "hmn", _G),
    "hne": Language("Chhattisgarhi", "छत्तीसगढ़ी", "hne", "hne", _B | _M),
    "hr": Language("Croatian", "Hrvatski", "hr", "hrv"),
    "hrx": Language("Hunsrik", "Hunsrik", "hrx", "hrx", _G),
    "hsb": Language("Upper Sorbian", "Hornjoserbšćina", "hsb", "hsb", _B | _M),
    "ht": Language("Haitian Creole", "Kreyòl ayisyen", "ht", "hat"),
    "hu": Language("Hungarian", "Magyar", "hu", "hun"),
    "hy": Language("Armenian", "Հայերեն", "hy", "hye"),
    "iba": Language("Iban", "Jaku Iban", "iba", "iba", _G),
    "id": Language("Indonesian", "Indonesia", "id", "ind"),
    "ig": Language("Igbo", "Igbo", "ig", "ibo", _G | _B | _M),
    "ikt": Language("Inuinnaqtun", "Inuinnaqtun", "ikt", "ikt", _B | _M),
    "ilo": Language("Ilocano", "Iloko", "ilo", "ilo", _G),
    "is": Language("Icelandic", "Íslenska", "is", "isl"),
    "it": Language("Italian", "Italiano", "it", "ita"),
    "iu": Language("Inuktitut", "ᐃᓄᒃᑎᑐᑦ", "iu", "iku", _G | _B | _M),
    "iu-Latn": Language("Inuktitut (Latin)", "Inuktitut (Latin)", "iu-Latn", "iu-Latn", _G | _B | _M),
    "ja": Language("Japanese", "日本語", "ja", "jpn"),
    "jam": Language("Jamaican Patois", "Patwah", "jam", "jam", _G),
    "jv": Language("Javanese", "Jawa", "jv", "jav", _G | _Y),
    "ka": Language("Georgian", "ქართული", "ka", "kat"),
    "kac": Language("Jingpo", "Jinghpaw ga", "kac", "kac", _G),
    "kazlat": Language("Kazakh (Latin)", "qazaqşa", "kazlat", "kazlat", _Y),
    "kek": Language("Qʼeqchiʼ", "Kekchi", "kek", "kek", _G),
    "kg": Language("Kikongo", "Kikongo", "kg", "kon", _G),
    "kha": Language("Khasi", "Ka Ktien Khasi", "kha", "kha", _G),
    "kk": Language("Kazakh", "Қазақ Тілі", "kk", "kaz"),
    "kl": Language("Greenlandic", "Kalaallisut", "kl", "kal", _G),
    "km": Language("Khmer", "ខ្មែរ", "km", "khm"),
    "kmr": Language("Kurdish (Northern)", "Kurdî (Bakur)", "kmr", "kmr", _B | _M),
    "kn": Language("Kannada", "ಕನ್ನಡ", "kn", "kan"),
    "ko": Language("Korean", "한국어", "ko", "kor"),
    "kr": Language("Kanuri", "Kànùrí", "kr", "kau", _G),
    "kri": Language("Krio", "Krio", "kri", "kri", _G),
    "ks": Language("Kashmiri", "کٲشُر", "ks", "kas", _B | _M),
    "ktu": Language("Kituba", "Kikongo ya leta", "ktu", "ktu", _G),
    "ku": Language("Kurdish", "Kurdî", "ku", "kur", _G | _B | _M),
    "kv": Language("Komi", "Коми кыв", "kv", "kom", _G | _Y),
    "ky": Language("Kyrgyz", "Kyrgyz", "ky", "kir"),
    "la": Language("Latin", "Latina", "la", "lat", _G | _Y),
    "lb": Language("Luxembourgish", "Lëtzebuergesch", "lb", "ltz", _G | _Y),
    "lg": Language("Luganda", "Oluganda", "lg", "lug", _G | _B | _M),
    "li": Language("Limburgish", "Limburgs ", "li", "lim", _G),
    "lij": Language("Ligurian", "Lìgure", "lij", "lij", _G),
    "lmo": Language("Lombard", "Lombard", "lmo", "lmo", _G),
    "ln": Language("Lingala", "Lingála", "ln", "lin", _G | _B | _M),
    "lo": Language("Lao", "ລາວ", "lo", "lao"),
    "lt": Language("Lithuanian", "Lietuvių", "lt", "lit"),
    "ltg": Language("Latgalian", "latgalīšu volūda", "ltg", "ltg", _G),
    "lua": Language("Tshiluba", "Tshiluba", "lua", "lua", _G),
    "luo": Language("Luo", "Dholuo", "luo", "luo", _G),
    "lus": Language("Mizo", "Mizo ṭawng", "lus", "lus", _G),
    "lv": Language("Latvian", "Latviešu", "lv", "lav"),
    "lzh": Language("Chinese (Literary)", "中文 (文言文)", "lzh", "lzh", _B | _M),
    "mad": Language("Madurese", "Bhâsa Madhurâ", "mad", "mad", _G),
    "mai": Language("Maithili", "मैथिली", "mai", "mai", _G | _B | _M),
    "mak": Language("Makassarese", "Bahasa Makassar", "mak", "mak", _G),
    "mam": Language("Mam", "Qyol Mam", "mam", "mam", _G),
    "mfe": Language("Mauritian Creole", "Kreol Morisien", "mfe", "mfe", _G),
    "mg": Language("Malagasy", "Malagasy", "mg", "mlg"),
    "mh": Language("Marshallese", "Kajin Majōl", "mh", "mah", _G),
    "mhr": Language("Eastern Mari", "олык марий", "mhr", "mhr", _Y),
    "mi": Language("Maori", "Te Reo Māori", "mi", "mri"),
    "min": Language("Minangkabau", "Baso Minangkabau", "min", "min", _G),
    "mk": Language("Macedonian", "Македонски", "mk", "mkd"),
    "ml": Language("Malayalam", "മലയാളം", "ml", "mal"),
    "mn": Language("Mongolian", "Монгол хэл", "mn", "mon"),
    "mn-Mong": Language("Mongolian (Traditional)", "ᠮᠣᠩᠭᠣᠯ ᠬᠡᠯᠡ", "mn-Mong", "mn-Mong", _B | _M),
    "mni": Language("Manipuri", "\uABC3\uABE9\uABC7\uABE9\uABC2\uABE3\uABDF", "mni", "mni", _G | _B | _M),
    "mr": Language("Marathi", "मराठी", "mr", "mar"),
    "mrj": Language("Western Mari", "Мары йӹлмӹ", "mrj", "mrj", _Y),
    "ms": Language("Malay", "Melayu", "ms", "msa"),
    "ms-Arab": Language("Malay (Jawi)", "بهاس ملايو", "ms-Arab", "ms-Arab", _G),
    "mt": Language("Maltese", "Malti", "mt", "mlt"),
    "mwr": Language("Marwari", "मारवाड़ी", "mwr", "mwr", _G),
    "mww": Language("Hmong Daw", "Hmong Daw", "mww", "mww", _B | _M),
    "my": Language("Burmese", "မြန်မာ", "my", "mya"),
    "ndc": Language("Ndau", "Ndau", "ndc", "ndc", _G),
    "ne": Language("Nepali", "नेपाली", "ne", "nep"),
    "new": Language("Newar", "नेपाल भाषा", "new", "new", _G),
    "nhe": Language("Nahuatl", "Nawatlahtolli", "nhe", "nhe", _G),
    "nl": Language("Dutch", "Nederlands", "nl", "nld"),
    "no": Language("Norwegian", "Norsk", "no", "nor"),
    "nqo": Language("NKo", "ߒߞߏ", "nqo", "nqo", _G),
    "nr": Language("Ndebele (South)", "isiNdebele", "nr", "nbl", _G),
    "nso": Language("Sepedi", "Sesotho sa Leboa", "nso", "nso", _G | _B | _M),
    "nus": Language("Nuer", "Thok Naath", "nus", "nus", _G),
    "ny": Language("Chichewa", "Nyanja", "ny", "nya", _G | _B | _M),
    "oc": Language("Occitan", "Occitan", "oc", "oci", _G),
    "om": Language("Oromo", "Afaan Oromoo", "om", "orm", _G),
    "or": Language("Odia", "ଓଡ଼ିଆ", "or", "ori", _G | _B | _M),
    "os": Language("Ossetian", "ирон ӕвзаг", "os", "oss", _G | _Y),
    "otq": Language("Querétaro Otomi", "Hñähñu", "otq", "otq", _B | _M),
    "pa": Language("Punjabi", "ਪੰਜਾਬੀ", "pa", "pan"),
    "pa-Arab": Language("Punjabi (Shahmukhi)", "پنجابی", "pa-Arab", "pa-Arab", _G),
    "pag": Language("Pangasinan", "Pangasinense", "pag", "pag", _G),
    "pam": Language("Kapampangan", "Pampangan", "pam", "pam", _G),
    "pap": Language("Papiamento", "Papiamento", "pap", "pap", _G | _Y),
    "pl": Language("Polish", "Polski", "pl", "pol"),
    "prs": Language("Dari", "دری", "prs", "prs", _G | _B | _M),
    "ps": Language("Pashto", "پښتو", "ps", "pus", _G | _B | _M),
    "pt": Language("Portuguese", "Português", "pt", "por"),
    "pt-PT": Language("Portuguese (Portugal)", "Português (Portugal)", "pt-PT", "pt-PT"),
    "qu": Language("Quechua", "Runa simi", "qu", "que", _G),
    "rn": Language("Rundi", "Ikirundi", "rn", "run", _G | _B | _M),
    "ro": Language("Romanian", "Română", "ro", "ron"),
    "rom": Language("Romani", "romani ćhib", "rom", "rom", _G),
    "ru": Language("Russian", "Русский", "ru", "rus"),
    "rw": Language("Kinyarwanda", "Kinyarwanda", "rw", "kin", _G | _B | _M),
    "sa": Language("Sanskrit", "संस्कृत", "sa", "san", _G),
    "sah": Language("Yakut", "Саха тыла", "sah", "sah", _G | _Y),
    "sat": Language("Santali", "Santali", "sat", "sat", _G),
    "scn": Language("Sicilian", "sicilianu", "scn", "scn", _G),
    "sd": Language("Sindhi", "سنڌي", "sd", "snd", _G | _B | _M),
    "se": Language("Northern Sámi", "davvisámegiella", "se", "sme", _G),
    "sg": Language("Sango", "yângâ tî sängö", "sg", "sag", _G),
    "shn": Language("Shan", "လိၵ်ႈတႆး", "shn", "shn", _G),
    "si": Language("Sinhala", "සිංහල", "si", "sin"),
    "sjn": Language("Sindarin", "Eledhrim", "sjn", "sjn", _Y),
    "sk": Language("Slovak", "Slovenčina", "sk", "slk"),
    "sl": Language("Slovenian", "Slovenščina", "sl", "slv"),
    "sm": Language("Samoan", "Gagana Sāmoa", "sm", "smo", _G | _B | _M),
    "sn": Language("Shona", "chiShona", "sn", "sna", _G | _B | _M),
    "so": Language("Somali", "Af Soomaali", "so", "som", _G | _B | _M),
    "sq": Language("Albanian", "Shqip", "sq", "sqi"),
    "sr": Language("Serbian (Cyrillic)", "Српски", "sr", "srp"),
    "sr-Latn": Language("Serbian (Latin)", "Srpski (latinica)", "sr-Latn", "srp-Latn", _B | _Y | _M),
    "ss": Language("Swati", "siSwati", "ss", "ssw", _G),
    "st": Language("Sotho", "Sotho", "st", "sot", _G | _B | _M),
    "su": Language("Sundanese", "Basa Sunda", "su", "sun", _G | _Y),
    "sus": Language("Susu", "Sosoxui", "sus", "sus", _G),
    "sv": Language("Swedish", "Svenska", "sv", "swe"),
    "sw": Language("Swahili", "Kiswahili", "sw", "swa"),
    "szl": Language("Silesian", "ślōnskŏ gŏdka", "szl", "szl", _G),
    "ta": Language("Tamil", "தமிழ்", "ta", "tam"),
    "tcy": Language("Tulu", "ತುಳು", "tcy", "tcy", _G),
    "te": Language("Telugu", "తెలుగు", "te", "tel"),
    "tet": Language("Tetum", "Tetun", "tet", "tet", _G),
    "tg": Language("Tajik", "тоҷикӣ", "tg", "tgk", _G | _Y),
    "th": Language("Thai", "ไทย", "th", "tha"),
    "ti": Language("Tigrinya", "ትግር", "ti", "tir", _G | _B | _M),
    "tiv": Language("Tiv", "Tiv", "tiv", "tiv", _G),
    "tk": Language("Turkmen", "Türkmen Dili", "tk", "tuk", _G | _B | _M),
    "tl": Language("Tagalog", "Tagalog", "tl", "tgl", _G | _Y),
    "tlh": Language("Klingon", "tlhIngan Hol", "tlh", "tlh", _B | _M),
    "tlh-Piqd": Language("Klingon (pIqaD)", "Klingon (pIqaD)", "tlh-Piqd", "tlh-Piqd", _M),
    "tn": Language("Tswana", "Setswana", "tn", "tn", _G | _B | _M),
    "to": Language("Tongan", "Lea Fakatonga", "to", "ton", _G | _B | _M),
    "tpi": Language("Tok Pisin", "Tok Pisin", "tpi", "tpi", _G),
    "tr": Language("Turkish", "Türkçe", "tr", "tur"),
    "trp": Language("Kokborok", "Kokborok", "trp", "trp", _G),
    "ts": Language("Tsonga", "Xitsonga", "ts", "tso", _G),
    "tt": Language("Tatar", "Татар", "tt", "tat"),
    "tum": Language("Tumbuka", "chiTumbuka", "tum", "tum", _G),
    "ty": Language("Tahitian", "Reo Tahiti", "ty", "tah", _G | _B | _M),
    "tyv": Language("Tuvan", "тыва дыл", "tyv", "tyv", _G | _Y),
    "udm": Language("Udmurt", "Удмурт кыл", "udm", "udm", _G | _Y),
    "ug": Language("Uyghur", "ئۇيغۇرچە", "ug", "uig", _G | _B | _M),
    "uk": Language("Ukrainian", "Українська", "uk", "ukr"),
    "ur": Language("Urdu", "اردو", "ur", "urd"),
    "uz": Language("Uzbek", "Uzbek", "uz", "uzb"),
    "uzbcyr": Language("Uzbek (Cyrillic)", "Ўзбекча", "uzbcyr", "uzbcyr", _Y),
    "ve": Language("Venda", "Tshivenḓa", "ve", "ven", _G),
    "vec": Language("Venetian", "vèneto", "vec", "vec", _G),
    "vi": Language("Vietnamese", "Tiếng Việt", "vi", "vie"),
    "war": Language("Waray", "Waray", "war", "war", _G),
    "wo": Language("Wolof", "Wolof", "wo", "wol", _G),
    "xh": Language("Xhosa", "isiXhosa", "xh", "xho"),
    "yi": Language("Yiddish", "ייִדיש", "yi", "yid", _G | _Y),
    "yo": Language("Yoruba", "Èdè Yorùbá", "yo", "yor", _G | _B | _M),
    "yua": Language("Yucatec Maya", "Yucatec Maya", "yua", "yua", _G | _B | _M),
    "yue": Language("Cantonese", "粵語", "yue", "yue", _G | _B | _M),
    "zap": Language("Zapotec", "Diidxazá", "zap", "zap", _G),
    "zh-CN": Language("Chinese (Simplified)", "中文 (简体)", "zh-CN", "zho-CN"),
    "zh-TW": Language("Chinese (Traditional)", "繁體中文 (繁體)", "zh-TW", "zho-TW", _G | _B | _M),
    "zu": Language("Zulu", "Isi-Zulu", "zu", "zul"),
}

LANGUAGE_ALIASES: Final[dict[str, str]] = {
    "bangla": "bn",
    "myanmar": "my",
    "in": "id",
    "iw": "he",
    "ji": "yi",
    "jw": "jv",
    "mo": "ro",
    "nb": "no",
    "nn": "no",
    "portuguese": "pt",
    "pt-br": "pt",
    "sh": "sr",
    "srp": "sr",
    "serbian": "sr",
    "sr-cyrl": "sr",
    "zh": "zh-CN",
    "zh-chs": "zh-CN",
    "zh-cht": "zh-TW",
    "zh-hans": "zh-CN",
    "zh-hant": "zh-TW",
    "zho": "zh-CN",
    "chinese": "zh-CN",
    "tlh-latn": "tlh",
    "mn-cyrl": "mn",
    "konkani": "gom",
    "kok": "gom",
    "sorani": "ckb",
    "ganda": "lg",
    "mni-mtei": "mni",
    "meitei": "mni",
    "twi": "ak",
    "tw": "ak",
    "fa-af": "prs",
    "tamazight": "ber",
    "bm-nkoo": "nqo",
    "ndc-zw": "ndc",
    "sat-latn": "sat",
}

LANGUAGE_DICTIONARY: Final[LanguageDictionary] = LanguageDictionary(LANGUAGES, LANGUAGE_ALIASES)
