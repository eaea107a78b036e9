"""Static locale bundles for the muhurat form.

Each supported language ships one flat ``key -> string`` JSON bundle under
``locales/``. Bundles are read once per process and exposed read-only.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

LOCALES_DIR = Path(__file__).resolve().parent / "locales"

SUPPORTED_LANGS = ("en", "gu")
FALLBACK_LANG = "en"

LocaleTable = Mapping[str, Mapping[str, str]]


def default_lang() -> str:
    lang = (os.getenv("DEFAULT_LANG") or FALLBACK_LANG).lower()
    return lang if lang in SUPPORTED_LANGS else FALLBACK_LANG


def clamp_lang(lang: str | None) -> str:
    if not lang:
        return default_lang()
    lang = lang.strip().lower()
    return lang if lang in SUPPORTED_LANGS else default_lang()


def _read_bundle(path: Path) -> Mapping[str, str]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Locale bundle {path.name} must be a JSON object")
    return MappingProxyType({str(k): str(v) for k, v in data.items()})


@lru_cache(maxsize=1)
def locale_table() -> LocaleTable:
    """Return the process-wide locale table, loading it on first use."""

    tables = {lang: _read_bundle(LOCALES_DIR / f"{lang}.json") for lang in SUPPORTED_LANGS}
    return MappingProxyType(tables)
