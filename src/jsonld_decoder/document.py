"""RecipeJSONLDDecoder: raw document → typed record."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from .errors import DocumentError
from .html import extract_jsonld
from .recipe import Recipe

logger = logging.getLogger(__name__)


class RecipeJSONLDDecoder:
    """Decodes a JSON-LD document into *record_type*.

    Usage::

        decoder = RecipeJSONLDDecoder()
        recipe = decoder.decode(b'{"@type": "Recipe", "name": "Soup"}')
        recipe.name     # → "Soup"

    *record_type* must provide ``from_jsonld(obj)``; the node handed to it
    is the first one whose ``@type`` names *type_name*.
    """

    def __init__(
        self,
        record_type: Any = Recipe,
        type_name: str = "Recipe",
        loads: Callable[[str | bytes], Any] = json.loads,
    ) -> None:
        self.record_type = record_type
        self.type_name = type_name
        self.loads = loads

    def decode(self, data: str | bytes) -> Any:
        """Parse *data* as JSON and decode the first matching node."""
        try:
            tree = self.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentError(f"invalid JSON: {exc}") from exc
        return self.decode_object(tree)

    def decode_object(self, tree: Any) -> Any:
        """Decode an already-parsed JSON tree."""
        node = find_node(tree, self.type_name)
        if node is None:
            raise DocumentError(f"no {self.type_name} node in document")
        return self.record_type.from_jsonld(node)

    def decode_html(self, html: str | bytes) -> Any:
        """Decode the first ``application/ld+json`` block holding a matching node."""
        for index, block in enumerate(extract_jsonld(html)):
            node = find_node(block, self.type_name)
            if node is not None:
                return self.record_type.from_jsonld(node)
            logger.debug("JSON-LD block %d holds no %s node", index, self.type_name)
        raise DocumentError(f"no {self.type_name} JSON-LD block in page")


def find_node(data: Any, type_name: str = "Recipe") -> dict | None:
    """Depth-first search for a keyed object whose ``@type`` names *type_name*.

    Looks through top-level lists and ``@graph`` wrappers.
    """
    if isinstance(data, dict):
        if _names_type(data.get("@type"), type_name):
            return data
        if "@graph" in data:
            return find_node(data["@graph"], type_name)
    elif isinstance(data, list):
        for item in data:
            found = find_node(item, type_name)
            if found is not None:
                return found
    return None


def _names_type(declared: Any, type_name: str) -> bool:
    if isinstance(declared, str):
        return declared == type_name or declared.rsplit("/", 1)[-1] == type_name
    if isinstance(declared, list):
        return any(_names_type(d, type_name) for d in declared)
    return False
