"""Application export – identifier to label inflections."""
from __future__ import annotations

import re

__all__ = ["humanize", "underscore"]

_ID_SUFFIX = re.compile(r"(?<=.)_id$")
_SEPARATORS = re.compile(r"[_.\s]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def humanize(identifier: object) -> str:
    """Turn an identifier into a label.

    ``"first_name"`` -> ``"First name"``, ``"address.city"`` ->
    ``"Address city"``, ``"author_id"`` -> ``"Author"``.
    """
    text = _ID_SUFFIX.sub("", str(identifier).strip())
    text = _SEPARATORS.sub(" ", text).strip().lower()
    return text[:1].upper() + text[1:]


def underscore(name: str) -> str:
    """``"UserAccount"`` -> ``"user_account"``, ``"HTTPRequest"`` -> ``"http_request"``."""
    text = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    text = _WORD_BOUNDARY.sub(r"\1_\2", text)
    return text.replace("-", "_").lower()
