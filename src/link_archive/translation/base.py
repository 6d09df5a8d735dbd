"""Abstract base class for translators and the Japanese passthrough rule."""

import logging
import re
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Hiragana, Katakana, CJK Unified Ideographs
JAPANESE_CHARS = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")


def contains_japanese(text: str) -> bool:
    """True if any character falls in the Hiragana/Katakana/Kanji ranges."""
    return bool(JAPANESE_CHARS.search(text))


class BaseTranslator(ABC):
    """Abstract base class for text translators."""

    @abstractmethod
    async def translate(self, text: str, target_language: str) -> str:
        """Translate text into the target language."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the translator identifier."""
        pass


async def translate_to_japanese(translator: BaseTranslator | None, text: str) -> str:
    """Translate a description to Japanese.

    Text that already contains Japanese is returned unchanged without calling
    the translator. Translation failures fall back to the original text.
    """
    if not text or not text.strip():
        return ""

    if contains_japanese(text) or translator is None:
        return text

    try:
        return await translator.translate(text, "ja")
    except Exception as e:
        logger.warning(f"  Translation failed ({translator.name}): {e}")
        return text
