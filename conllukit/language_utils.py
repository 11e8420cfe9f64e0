"""Language names for the ISO 639 codes found in sentence metadata."""

from __future__ import annotations

from typing import Optional

import pycountry

from .sentence import Sentence

LANGUAGE_METADATA_KEYS = ("lang", "language")


_LANGUAGE_BY_CODE = {}
for _lang in pycountry.languages:
    fields = getattr(_lang, "_fields", {})
    for attr in ("alpha_2", "alpha_3", "bibliographic", "terminology"):
        code = fields.get(attr)
        if code:
            _LANGUAGE_BY_CODE.setdefault(code.lower(), _lang)


def _lookup_language_by_code(code: str):
    # lookup() also matches names, so "en" alone would hit the language named "En"
    code_key = code.lower()
    if code_key in _LANGUAGE_BY_CODE:
        return _LANGUAGE_BY_CODE[code_key]
    try:
        return pycountry.languages.lookup(code)
    except LookupError:
        return None


def language_name(code: Optional[str]) -> Optional[str]:
    """
    Resolve an ISO 639 code (``en``, ``eng``, ``grc``) to a language name.

    Returns None for empty, undetermined or unknown codes.
    """
    code_candidate = (code or "").strip()
    if not code_candidate or code_candidate.lower() in {"xx", "und", "unknown"}:
        return None
    # Regional variants like pt_BR or en-US resolve on their language part
    base = code_candidate.replace("_", "-").split("-", 1)[0]
    lang_obj = _lookup_language_by_code(base)
    if lang_obj is None:
        return None
    return getattr(lang_obj, "name", None)


def sentence_language(sentence: Sentence) -> Optional[str]:
    """Return the raw language code from a sentence's metadata, if any."""
    for key in LANGUAGE_METADATA_KEYS:
        value = sentence.metadata.get(key)
        if value:
            return value
    return None
