from typing import Dict
from dupfinder.core.interfaces import TranslatorProtocol
from dupfinder.translations.en import translations as en_translations
from dupfinder.translations.es import translations as es_translations

TRANSLATIONS: Dict[str, Dict] = {
    "en": en_translations,
    "es": es_translations,
}

LANGUAGE_CHOICES = list(TRANSLATIONS.keys())


class DictTranslator(TranslatorProtocol):
    def __init__(self, lang_code: str = "en"):
        self.lang_code = lang_code
        self.translations = TRANSLATIONS.get(lang_code, TRANSLATIONS["en"])

    def tr(self, key: str) -> str:
        return self.translations.get(key, key)
