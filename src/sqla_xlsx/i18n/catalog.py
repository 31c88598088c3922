"""i18n – CatalogTranslator backed by a nested mapping."""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sqla_xlsx.i18n.ports import Translator


class CatalogTranslator(Translator):
    """Looks keys up in a nested catalog.

    ``"orm.attributes.user.first_name"`` is found either by walking nested
    mappings (``catalog["orm"]["attributes"]["user"]["first_name"]``) or,
    failing that, as a literal flat key at any level::

        CatalogTranslator({"orm": {"attributes": {"user.first_name": "Given name"}}})

    Only string leaves count as translations.
    """

    def __init__(self, catalog: Mapping[str, Any]) -> None:
        self._catalog = catalog

    @classmethod
    def from_json(cls, path: str | Path) -> CatalogTranslator:
        with open(path, encoding="utf-8") as fh:
            return cls(json.load(fh))

    def translate(self, key: str, default: str) -> str:
        found = self._lookup(self._catalog, key.split("."))
        return default if found is None else found

    def _lookup(self, node: Any, parts: list[str]) -> str | None:
        if not parts:
            return node if isinstance(node, str) else None
        if not isinstance(node, Mapping):
            return None
        # longest literal prefix first so flat keys win over partial nesting
        for i in range(len(parts), 0, -1):
            head = ".".join(parts[:i])
            if head in node:
                found = self._lookup(node[head], parts[i:])
                if found is not None:
                    return found
        return None


__all__ = ["CatalogTranslator"]
