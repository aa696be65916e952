"""Offline translation: dictionary, public lookup, patterns and word-by-word substitution"""

import re
import logging
from typing import Callable, Dict, List, Optional

import requests
from requests.exceptions import RequestException

from . import config
from .dictionaries import OFFLINE_DICTIONARY, PHRASE_PATTERNS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"\W")

# (text, source_lang, target_lang) -> translated text or None
Lookup = Callable[[str, str, str], Optional[str]]


class PublicLookup:
    """
    Best-effort lookup against the free MyMemory endpoint (no key required).
    Every failure is logged and reported as None, never raised.
    """

    def __init__(self, url: str = None, timeout: float = None, session: requests.Session = None):
        self.url = url or config.PUBLIC_LOOKUP_URL
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.USER_AGENT})

    def __call__(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        params = {
            "q": text[:config.PUBLIC_LOOKUP_MAX_CHARS],
            "langpair": f"{source_lang}|{target_lang}",
        }
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (RequestException, ValueError) as e:
            logger.warning(f"Public lookup failed ({type(e).__name__}): {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Public lookup returned {type(data).__name__}, expected a JSON object")
            return None

        # Quota and language errors come back as 200 with an error status in the body
        if str(data.get("responseStatus", 200)) != "200":
            logger.warning(f"Public lookup refused: {data.get('responseDetails', 'unknown error')}")
            return None

        response_data = data.get("responseData")
        translated = response_data.get("translatedText") if isinstance(response_data, dict) else None
        if not isinstance(translated, str):
            logger.warning("Public lookup response has no translated text")
            return None
        return translated or None


class OfflineTranslator:
    """
    Heuristic translator that needs no credentials.

    Strategies, first non-identity result wins:
      a. exact dictionary hit
      b. public lookup (best effort, network)
      c. sentence-opener pattern substitution
      d. word-by-word substitution
    """

    def __init__(self, dictionary: Dict[str, Dict[str, str]] = None,
                 patterns: Dict[str, Dict[str, str]] = None,
                 lookup: Optional[Lookup] = None,
                 use_public_lookup: bool = True):
        # Private copy, so add_translation never touches the shared table
        source = OFFLINE_DICTIONARY if dictionary is None else dictionary
        self.dictionary = {key: dict(value) for key, value in source.items()}
        self.patterns = PHRASE_PATTERNS if patterns is None else patterns

        if lookup is None and use_public_lookup:
            lookup = PublicLookup()
        self.lookup = lookup

        self._strategies = [
            self._from_dictionary,
            self._from_public_lookup,
            self._from_patterns,
            self._from_words,
        ]

    # ── Strategies ──────────────────────────────────────────────────────────

    def _from_dictionary(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        entry = self.dictionary.get(text.lower().strip())
        return entry.get(target_lang) if entry else None

    def _from_public_lookup(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        if self.lookup is None:
            return None
        return self.lookup(text, source_lang, target_lang)

    def _from_patterns(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        return self.translate_by_pattern(text, target_lang)

    def _from_words(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        return self.translate_word_by_word(text, target_lang)

    # ── Building blocks ─────────────────────────────────────────────────────

    def translate_by_pattern(self, text: str, target_lang: str) -> Optional[str]:
        """
        Replace known sentence openers; None when nothing matched.
        Matching runs on the lowercased text, so the rest of the sentence comes back lowercased.
        """
        lang_patterns = self.patterns.get(target_lang)
        if not lang_patterns:
            return None

        lowered = text.lower()
        translated = lowered
        for english, replacement in lang_patterns.items():
            if english in translated:
                translated = re.sub(re.escape(english), replacement, translated, flags=re.I)

        return translated if translated != lowered else None

    def translate_word_by_word(self, text: str, target_lang: str) -> Optional[str]:
        """
        Look up each whitespace token on its own. Unknown tokens are kept in
        their lowercased form, so the output may mix languages. None when no
        token matched.
        """
        words = text.lower().split()
        translated_words = []
        found = False

        for word in words:
            entry = self.dictionary.get(_NON_WORD_RE.sub("", word))
            translation = entry.get(target_lang) if entry else None
            if translation:
                translated_words.append(translation)
                found = True
            else:
                translated_words.append(word)

        return " ".join(translated_words) if found else None

    # ── Public API ──────────────────────────────────────────────────────────

    def translate(self, text: str, source_lang: str = "en", target_lang: str = "as") -> str:
        """Run the offline strategies; the input comes back unchanged on failure"""
        if not isinstance(text, str):
            raise ConfigurationError(f"Text to translate must be a string, got {type(text).__name__}")
        if not text or source_lang == target_lang:
            return text

        for strategy in self._strategies:
            result = strategy(text, source_lang, target_lang)
            if result and result != text:
                logger.debug(f"Offline strategy {strategy.__name__} translated {text[:40]!r}")
                return result
        return text

    def heuristic(self, text: str, target_lang: str) -> Optional[str]:
        """Pattern substitution followed by word-by-word lookup on what is left"""
        patterned = self.translate_by_pattern(text, target_lang) or text
        result = self.translate_word_by_word(patterned, target_lang) or patterned
        return result if result != text else None

    def smart_translate(self, text: str, source_lang: str = "en", target_lang: str = "as") -> Dict:
        result = self.translate(text, source_lang, target_lang)
        if result != text:
            return {"text": result, "method": "offline", "confidence": 0.8}
        return {"text": text, "method": "fallback", "confidence": 0.1}

    def translate_batch(self, texts: List[str], source_lang: str = "en",
                        target_lang: str = "as") -> List[Dict]:
        results = []
        for text in texts:
            try:
                translated = self.translate(text, source_lang, target_lang)
            except ConfigurationError as e:
                results.append({"original": text, "translated": text, "success": False, "error": str(e)})
                continue
            results.append({
                "original": text,
                "translated": translated,
                "success": True,
                "method": "offline" if translated != text else "fallback",
            })
        return results

    def add_translation(self, english: str, assamese: str, manipuri: str):
        """Teach this translator a new entry"""
        key = english.lower().strip()
        self.dictionary[key] = {"as": assamese, "mni": manipuri}
        logger.info(f"Added offline translation for {key!r}")

    def has_translation(self, text: str, target_lang: str) -> bool:
        entry = self.dictionary.get(text.lower().strip())
        return bool(entry and entry.get(target_lang))

    def available_translations(self) -> List[str]:
        return list(self.dictionary)
