from .muhurat import CityCandidate, GeocodeResponse, LordRef, Period, TithiPeriod, NakshatraPeriod, MuhuratResult

from .session_viewmodel import (
    TimingVM,
    PeriodVM,
    SectionVM,
    ResultVM,
    SessionViewModel,
    CreateSessionRequest,
    DateUpdate,
    CityTextUpdate,
    CitySelection,
    LanguageUpdate,
)
