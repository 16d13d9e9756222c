# camino/api/services/translation_service.py
"""Offline phrase translation for pilgrims.

Lookups go through the bilingual tables in ``camino.api.data.phrasebook``.
Anything the tables cannot cover comes back annotated with the target
language name so the user can hand it off to Google Translate.
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import urlencode

from camino.api.data.phrasebook import IDIOM_PATTERNS, PHRASEBOOKS

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translate.google.com/"
MAX_PHRASE_WORDS = 6


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt-PT"
    BASQUE = "eu"
    GALICIAN = "gl"
    JAPANESE = "ja"
    KOREAN = "ko"
    CHINESE = "zh"
    RUSSIAN = "ru"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def supported(cls) -> List[Dict[str, str]]:
        return [{"code": lang.value, "name": lang.display_name} for lang in cls]


def normalize(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    text = re.sub(r"[^\w\s]", "", text.lower())
    return " ".join(text.split())


def _code(language: Union[Language, str]) -> str:
    return language.value if isinstance(language, Language) else str(language)


def _display_name(code: str) -> str:
    try:
        return Language(code).display_name
    except ValueError:
        return code


def _load_tables() -> Dict[Tuple[str, str], Dict[str, str]]:
    tables = {}
    for (source, target), entries in PHRASEBOOKS.items():
        forward = {}
        backward = {}
        for phrase, translation in entries.items():
            forward.setdefault(normalize(phrase), translation)
            # first English entry wins when several share a translation
            backward.setdefault(normalize(translation), phrase)
        tables[(source, target)] = forward
        tables[(target, source)] = backward
    return tables


def _load_patterns() -> Dict[Tuple[str, str], List[Tuple[re.Pattern, str]]]:
    return {
        pair: [(re.compile(regex), template) for regex, template in patterns]
        for pair, patterns in IDIOM_PATTERNS.items()
    }


class TranslationService:
    """Stateless dictionary translator."""

    def __init__(self, tables=None, patterns=None):
        self.tables = tables if tables is not None else _load_tables()
        self.patterns = patterns if patterns is not None else _load_patterns()

    def supports(self, source: Union[Language, str], target: Union[Language, str]) -> bool:
        return (_code(source), _code(target)) in self.tables

    def translate(self, text: str, source: Union[Language, str], target: Union[Language, str]) -> str:
        """Translate ``text`` from ``source`` into ``target``.

        Returns the input unchanged when both languages are the same, and
        ``"<text> (<Target language>)"`` when nothing in the tables matched.
        """
        source_code, target_code = _code(source), _code(target)
        if source_code == target_code:
            return text

        table = self.tables.get((source_code, target_code), {})
        normalized = normalize(text)

        if normalized in table:
            return table[normalized]

        result = self._translate_idiom(normalized, table, (source_code, target_code))
        if result is None:
            result = self._translate_phrases(normalized, table)

        if result is None:
            logger.debug(f"No phrasebook match for '{text}' ({source_code}->{target_code})")
            return f"{text} ({_display_name(target_code)})"
        return result

    def _translate_idiom(self, normalized: str, table: Dict[str, str], pair) -> Optional[str]:
        for pattern, template in self.patterns.get(pair, []):
            match = pattern.match(normalized)
            if not match:
                continue
            remainder = match.group(1)
            translated = table.get(remainder) or self._translate_phrases(remainder, table)
            return template.format(translated or remainder)
        return None

    def _translate_phrases(self, normalized: str, table: Dict[str, str]) -> Optional[str]:
        """Greedy longest-phrase match, falling back to single words.

        Returns None if not a single word or phrase was found in ``table``.
        """
        words = normalized.split()
        output = []
        matched = False
        i = 0

        while i < len(words):
            for size in range(min(MAX_PHRASE_WORDS, len(words) - i), 1, -1):
                phrase = " ".join(words[i:i + size])
                if phrase in table:
                    output.append(table[phrase])
                    matched = True
                    i += size
                    break
            else:
                word = words[i]
                if word in table:
                    output.append(table[word])
                    matched = True
                else:
                    output.append(word)
                i += 1

        return " ".join(output) if matched else None


def build_google_translate_url(text: str, source: Union[Language, str], target: Union[Language, str]) -> str:
    query = urlencode({
        "sl": _code(source),
        "tl": _code(target),
        "op": "translate",
        "text": text,
    })
    return f"{GOOGLE_TRANSLATE_URL}?{query}"


def destination_translation_text(location_name: str, hotel_name: Optional[str] = None) -> str:
    """Text handed to the translator for a destination card."""
    if hotel_name:
        return f"{location_name} - {hotel_name}"
    return location_name


__all__ = [
    "Language",
    "TranslationService",
    "normalize",
    "build_google_translate_url",
    "destination_translation_text",
]
