"""Build localized view models from session state.

Labels are resolved on every call, so switching the session language
re-renders everything already on screen in the new language.
"""

from __future__ import annotations

from typing import List, Optional

from ..i18n.resolve import resolve, translate
from ..schemas.muhurat import CityCandidate, MuhuratResult, NakshatraPeriod, Period, TithiPeriod
from ..schemas.session_viewmodel import PeriodVM, ResultVM, SectionVM, SessionViewModel, TimingVM
from .session_controller import SessionSnapshot
from .time_format import format_clock
from .util.place_defaults import DEF_TZ

CHROME_KEYS = ("title", "date", "cityPlaceholder", "reset")
TIMING_KEYS = ("sunrise", "sunset", "moonrise", "moonset")
SECTION_KEYS = ("tithi", "nakshatra", "karana", "yoga")


def _period_vm(item: Period, lang: str, tz: str) -> PeriodVM:
    paksha = lord = None
    if isinstance(item, TithiPeriod):
        paksha = resolve(item.paksha, lang)
    if isinstance(item, NakshatraPeriod):
        lord = resolve(item.lord.name if item.lord else None, lang)
    return PeriodVM(
        name=resolve(item.name, lang),
        paksha=paksha,
        lord=lord,
        start=format_clock(item.start, lang, tz),
        end=format_clock(item.end, lang, tz),
    )


def render_result(result: MuhuratResult, lang: str, tz: str) -> ResultVM:
    city_name = result.city_name or ""
    timings = [
        TimingVM(key=key, label=translate(key, lang), value=format_clock(getattr(result, key), lang, tz))
        for key in TIMING_KEYS
    ]
    sections = [
        SectionVM(
            key=key,
            title=translate(key, lang),
            items=[_period_vm(item, lang, tz) for item in getattr(result, key)],
        )
        for key in SECTION_KEYS
    ]
    return ResultVM(
        heading=f"{translate('resultsFor', lang)} {city_name}".strip(),
        city_name=city_name,
        tz=tz,
        vaara_label=translate("vaara", lang),
        vaara=resolve(result.vaara, lang),
        timings=timings,
        sections=sections,
        labels={key: translate(key, lang) for key in ("start", "end", "lord")},
    )


def _result_tz(result: MuhuratResult) -> str:
    return result.display_tz or DEF_TZ


def render_session(session_id: str, snap: SessionSnapshot, lang: Optional[str] = None) -> SessionViewModel:
    lang = lang or snap.lang
    result_vm = None
    if snap.result is not None:
        result_vm = render_result(snap.result, lang, _result_tz(snap.result))
    suggestions: List[CityCandidate] = list(snap.suggestions)
    return SessionViewModel(
        session_id=session_id,
        lang=lang,
        state=snap.state.value,
        date=snap.date.isoformat() if snap.date else None,
        city_text=snap.city_text,
        selected_city=snap.selected_city,
        suggestions=suggestions,
        loading=snap.loading,
        submit_label=translate("loading" if snap.loading else "getMuhurat", lang),
        chrome={key: translate(key, lang) for key in CHROME_KEYS},
        result=result_vm,
    )
