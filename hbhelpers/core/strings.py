# hbhelpers/core/strings.py
"""
Case and format conversions exposed to templates as plain helpers
({{underscore name}}, {{camelize name}}...). Every function maps one
string to one string and never fails on empty input.
"""
import re
import unicodedata
from typing import Callable, Dict

_NOT_WORD_CHARS = re.compile(r"[^A-Za-z0-9_\- ]")
_WHITESPACE_RUN = re.compile(r"\s+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")

def literate(text: str) -> str:
    """Transliterates accented characters to plain ASCII ('Café' -> 'Cafe')."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if ord(ch) < 128)

def _normalize(text: str, keep_dashes: bool = False) -> str:
    cleaned = _WHITESPACE_RUN.sub(" ", literate(text)).strip()
    cleaned = _NOT_WORD_CHARS.sub("", cleaned)
    cleaned = _WHITESPACE_RUN.sub("_", cleaned.strip())
    if not keep_dashes:
        cleaned = cleaned.replace("-", "_")
    return cleaned

def normalize(text: str) -> str:
    """
    Identifier-safe form: accents dropped, punctuation removed, spaces and
    dashes turned into underscores. Casing is preserved.
    """
    return _normalize(text)

def normalize_lower(text: str) -> str:
    return _normalize(text).lower()

def underscore(text: str) -> str:
    """snake_case: 'HTTPRequest handler' -> 'http_request_handler'."""
    words = _normalize(text, keep_dashes=True)
    words = _ACRONYM_BOUNDARY.sub(r"\1_\2", words)
    words = _CASE_BOUNDARY.sub(r"\1_\2", words)
    return words.replace("-", "_").lower()

def camelize(text: str) -> str:
    """
    UpperCamelCase: every word boundary (underscore, dash, space) starts a
    capitalized word; the rest of each word keeps its casing so existing
    camel humps survive ('my awesomeThing' -> 'MyAwesomeThing').
    """
    words = [word for word in _normalize(text).split("_") if word]
    return "".join(word[0].upper() + word[1:] for word in words)

def camelize_lower(text: str) -> str:
    camelized = camelize(text)
    if not camelized:
        return camelized
    return camelized[0].lower() + camelized[1:]

def clear_extension(text: str) -> str:
    # everything from the first dot on is the extension ('steps.feature.rb' -> 'steps')
    return text.split(".")[0]

STRING_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "literate": literate,
    "normalize": normalize,
    "normalize_lower": normalize_lower,
    "underscore": underscore,
    "camelize": camelize,
    "camelize_lower": camelize_lower,
    "clear_extension": clear_extension,
}
