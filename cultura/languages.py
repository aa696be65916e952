"""Supported languages and language-code helpers"""

import re
from dataclasses import dataclass
from typing import Dict, List

from .errors import ConfigurationError


@dataclass(frozen=True)
class Language:
    code: str
    name: str
    native_name: str
    script: str
    service_code: str  # code expected by the remote translation pipeline
    direction: str = "ltr"


SUPPORTED_LANGUAGES: Dict[str, Language] = {
    lang.code: lang
    for lang in (
        Language("en", "English", "English", "Latin", "en"),
        Language("as", "Assamese", "অসমীয়া", "Bengali", "as"),
        Language("mni", "Manipuri", "ꯃꯅꯤꯄꯨꯔꯤ", "Meetei Mayek", "mni"),
        Language("bn", "Bengali", "বাংলা", "Bengali", "bn"),
        Language("hi", "Hindi", "हिन्दी", "Devanagari", "hi"),
    )
}

# Script ranges, checked in order
_MEETEI_MAYEK_RE = re.compile(r"[\uABC0-\uABFF\uAAE0-\uAAFF]")
_BENGALI_SCRIPT_RE = re.compile(r"[\u0980-\u09FF]")
_DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]")


def validate_language_code(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def require_language(code: str) -> Language:
    """Return the language for a code, or raise ConfigurationError"""
    if not isinstance(code, str) or code not in SUPPORTED_LANGUAGES:
        supported = ", ".join(SUPPORTED_LANGUAGES)
        raise ConfigurationError(f"Unsupported language code {code!r} (supported: {supported})")
    return SUPPORTED_LANGUAGES[code]


def get_service_language_code(code: str) -> str:
    lang = SUPPORTED_LANGUAGES.get(code)
    return lang.service_code if lang else code


def get_supported_language_pairs() -> List[Dict[str, str]]:
    """Every ordered (source, target) pair with distinct languages"""
    pairs = []
    for source in SUPPORTED_LANGUAGES.values():
        for target in SUPPORTED_LANGUAGES.values():
            if source.code != target.code:
                pairs.append({
                    "source": source.code,
                    "target": target.code,
                    "source_name": source.name,
                    "target_name": target.name,
                })
    return pairs


def detect_language(text: str) -> str:
    """
    Script-based guess. Assamese and Bengali share a script; Assamese wins
    since it is the regional default.
    """
    if _MEETEI_MAYEK_RE.search(text):
        return "mni"
    if _BENGALI_SCRIPT_RE.search(text):
        return "as"
    if _DEVANAGARI_RE.search(text):
        return "hi"
    return "en"
