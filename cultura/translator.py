"""Translation resolver: cache, curated phrases, offline heuristics and remote pipeline"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .bhashini import BhashiniClient
from .cache import TranslationCache
from .dictionaries import CURATED_PHRASES
from .errors import ConfigurationError, ServiceError
from .languages import SUPPORTED_LANGUAGES, require_language
from .offline_translation import OfflineTranslator

logger = logging.getLogger(__name__)

# (text, source_lang, target_lang) -> translated text or None
Strategy = Callable[[str, str, str], Optional[str]]

# Confidence reported for each way of producing an answer
STAGE_CONFIDENCE = {
    "identity": 1.0,
    "curated": 1.0,
    "cache": 0.9,
    "remote": 0.9,
    "offline": 0.8,
    "heuristic": 0.3,
    "fallback": 0.0,
}


@dataclass(frozen=True)
class TranslationResult:
    text: str
    method: str
    confidence: float


def first_success(strategies: Sequence[Tuple[str, Strategy]], text: str,
                  source_lang: str, target_lang: str) -> Optional[Tuple[str, str]]:
    """
    Try each named strategy in order and return (name, result) for the first
    usable result: not None and different from the input.
    """
    for name, strategy in strategies:
        result = strategy(text, source_lang, target_lang)
        if result is not None and result != text:
            return name, result
    return None


class TranslationResolver:
    """
    Best-effort translator for the supported languages.

    Resolution order:
      1. identity when source and target match
      2. cache
      3. curated phrase table
      4. offline heuristic cascade
      5. remote translation pipeline
      6. last-resort heuristic (pattern + word-by-word)
      7. the input text unchanged

    Service failures in stage 5 are logged and skipped. Only malformed input
    (non-string text, unsupported language code) raises.
    """

    def __init__(self, cache: TranslationCache = None,
                 offline: OfflineTranslator = None,
                 remote: Optional[BhashiniClient] = None,
                 curated: Dict[str, Dict[str, str]] = None,
                 use_remote: bool = True):
        self.cache = cache or TranslationCache()
        self.offline = offline or OfflineTranslator()
        if remote is None and use_remote:
            remote = BhashiniClient()
        self.remote = remote
        self.curated = CURATED_PHRASES if curated is None else curated

        self._strategies: List[Tuple[str, Strategy]] = [
            ("curated", self._from_curated),
            ("offline", self._from_offline),
            ("remote", self._from_remote),
            ("heuristic", self._from_heuristic),
        ]

    # ── Stages ──────────────────────────────────────────────────────────────

    def _from_curated(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        entry = self.curated.get(text.lower().strip())
        return entry.get(target_lang) if entry else None

    def _from_offline(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        return self.offline.translate(text, source_lang, target_lang)

    def _from_remote(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        if self.remote is None:
            return None
        try:
            return self.remote.translate(text, source_lang, target_lang)
        except ServiceError as e:
            logger.warning(f"Remote translation failed ({type(e).__name__}, {e.code}): {e}")
            return None

    def _from_heuristic(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        return self.offline.heuristic(text, target_lang)

    # ── Public API ──────────────────────────────────────────────────────────

    def resolve(self, text: str, source_lang: str = "en", target_lang: str = "as") -> TranslationResult:
        """Translate and report which stage produced the answer"""
        require_language(source_lang)
        require_language(target_lang)
        if not isinstance(text, str):
            raise ConfigurationError(f"Text to translate must be a string, got {type(text).__name__}")

        if not text or source_lang == target_lang:
            return TranslationResult(text, "identity", STAGE_CONFIDENCE["identity"])

        cached = self.cache.get(text, source_lang, target_lang)
        if cached is not None:
            logger.debug(f"Cache hit: {source_lang}->{target_lang} {text[:40]!r}")
            return TranslationResult(cached, "cache", STAGE_CONFIDENCE["cache"])

        outcome = first_success(self._strategies, text, source_lang, target_lang)
        if outcome is None:
            logger.info(f"No translation found for {text[:40]!r}, returning input")
            return TranslationResult(text, "fallback", STAGE_CONFIDENCE["fallback"])

        method, translated = outcome
        self.cache.set(text, source_lang, target_lang, translated)
        logger.info(f"Translated {source_lang}->{target_lang} via {method}")
        return TranslationResult(translated, method, STAGE_CONFIDENCE[method])

    def translate(self, text: str, source_lang: str = "en", target_lang: str = "as") -> str:
        return self.resolve(text, source_lang, target_lang).text

    def translate_batch(self, texts: List[str], source_lang: str = "en",
                        target_lang: str = "as") -> List[Dict]:
        results = []
        for text in texts:
            try:
                translated = self.translate(text, source_lang, target_lang)
            except ConfigurationError as e:
                results.append({"original": text, "translated": text, "success": False, "error": str(e)})
                continue
            results.append({"original": text, "translated": translated, "success": True})
        return results

    def get_stats(self) -> Dict:
        return {
            "cache": self.cache.get_stats(),
            "supported_languages": len(SUPPORTED_LANGUAGES),
            "curated_translations": len(self.curated),
        }

    def clear_cache(self):
        self.cache.clear()
        logger.info("Translation cache cleared")

    def check_service_health(self) -> Dict:
        if self.remote is None:
            return {"available": False, "status": "disabled"}
        return self.remote.check_health()
