"""Extraction of JSON-LD blocks from HTML pages, and page fetching."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from bs4 import BeautifulSoup

from .config import Settings, load_settings

logger = logging.getLogger(__name__)


def extract_jsonld(html: str | bytes) -> list[Any]:
    """Return the parsed content of every ``application/ld+json`` script.

    Blocks that are empty or not valid JSON are skipped.  Raw bytes are
    decoded by BeautifulSoup, which honours a declared charset.
    """
    soup = BeautifulSoup(html, "html.parser")
    blocks = []
    for index, script in enumerate(soup.find_all("script", type="application/ld+json")):
        text = script.string
        if not text or not text.strip():
            logger.warning("Skipping empty JSON-LD block %d", index)
            continue
        try:
            blocks.append(json.loads(text))
        except json.JSONDecodeError as exc:
            logger.warning("Skipping JSON-LD block %d: %s", index, exc)
    return blocks


def fetch_html(url: str, settings: Settings | None = None) -> str:
    """GET *url* and return the body; HTTP errors propagate from requests."""
    settings = settings or load_settings()
    logger.info("Fetching %s", url)
    response = requests.get(
        url,
        headers={"User-Agent": settings.user_agent},
        timeout=settings.timeout,
    )
    response.raise_for_status()
    return response.text


def fetch_recipe(url: str, settings: Settings | None = None, decoder=None):
    """Fetch *url* and decode the recipe embedded in the page."""
    from .document import RecipeJSONLDDecoder

    decoder = decoder or RecipeJSONLDDecoder()
    return decoder.decode_html(fetch_html(url, settings))
