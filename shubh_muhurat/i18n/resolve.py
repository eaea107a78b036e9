"""Resolve display labels for a requested locale."""

from __future__ import annotations

from typing import Optional

from .locale_table import FALLBACK_LANG, LocaleTable, locale_table


def lookup(key: str, lang: str, table: Optional[LocaleTable] = None) -> Optional[str]:
    """Return the exact-match translation of ``key`` or ``None``."""

    tables = table if table is not None else locale_table()
    return tables.get(lang, {}).get(key)


def resolve(raw_label: Optional[str], lang: str, table: Optional[LocaleTable] = None) -> str:
    """Return the best display string for a label coming from the remote service.

    Labels may be dictionary keys or proper nouns the service returns
    untranslated; anything without a translation is shown as given, trimmed.
    """

    if not raw_label:
        return ""
    trimmed = raw_label.strip()
    if not trimmed:
        return ""
    translated = lookup(trimmed, lang, table)
    return trimmed if translated is None else translated


def translate(key: str, lang: str, table: Optional[LocaleTable] = None) -> str:
    """Translate a fixed UI key, falling back to English and then the key itself."""

    translated = lookup(key, lang, table)
    if translated is None and lang != FALLBACK_LANG:
        translated = lookup(key, FALLBACK_LANG, table)
    return key if translated is None else translated
