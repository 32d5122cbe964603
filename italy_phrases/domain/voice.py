"""Locale to Kokoro voice resolution."""
from __future__ import annotations

import logging

logger = logging.getLogger("phrases_app")

# Kokoro picks its G2P pipeline from the first letter of the voice id.
LOCALE_LANG_CODES = {
    "en-us": "a",
    "en-gb": "b",
    "es-es": "e",
    "fr-fr": "f",
    "hi-in": "h",
    "it-it": "i",
    "ja-jp": "j",
    "pt-br": "p",
    "zh-cn": "z",
}

LOCALE_DEFAULT_VOICES = {
    "a": "af_heart",
    "b": "bf_emma",
    "e": "ef_dora",
    "f": "ff_siwis",
    "h": "hf_alpha",
    "i": "if_sara",
    "j": "jf_alpha",
    "p": "pf_dora",
    "z": "zf_xiaobei",
}


def normalize_locale(locale: str) -> str:
    return str(locale or "").strip().replace("_", "-").lower()


def lang_code_for_locale(locale: str) -> str:
    normalized = normalize_locale(locale)
    lang_code = LOCALE_LANG_CODES.get(normalized)
    if lang_code is None:
        raise ValueError(f"Unsupported speech locale: {locale!r}")
    return lang_code


def resolve_voice(locale: str, preferred_voice: str | None = None) -> str:
    """Pick the voice for a locale, keeping a preferred voice when it matches."""
    lang_code = lang_code_for_locale(locale)
    voice = str(preferred_voice or "").strip()
    if voice and voice[0] == lang_code:
        return voice
    if voice:
        logger.warning(
            "Voice %s does not match locale %s; using %s",
            voice,
            locale,
            LOCALE_DEFAULT_VOICES[lang_code],
        )
    return LOCALE_DEFAULT_VOICES[lang_code]
