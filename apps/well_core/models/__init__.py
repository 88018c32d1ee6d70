from .well import Well, Datum  # noqa: F401
from .wellbore import Wellbore, Scenario  # noqa: F401
from .survey import DefinitiveSurveyHeader, SurveyStation  # noqa: F401
from .hole_section import HoleSectionGroup, HoleSection, WellboreIntegrityTest  # noqa: F401
from .assembly import Assembly, AssemblyComponent, SafetyValve, Packer, PipeCatalog  # noqa: F401
from .cement import CementJob, CementStage  # noqa: F401
from .opening import WellboreOpening, OpeningStatus  # noqa: F401
from .fluid import DrillingFluid, CompletionFluid  # noqa: F401
from .wellhead import (  # noqa: F401
    Wellhead,
    WellheadComponent,
    WellheadOutlet,
    WellheadHanger,
    WellheadAnnularPressure,
    WellheadPressureRelief,
)
from .subsurface import (  # noqa: F401
    WellboreGradient,
    WellboreFormation,
    FormationPick,
    ScenarioFormationLink,
    LogInterval,
)
from .daily_report import DailyReport  # noqa: F401
from .derating import PressureSurvey, FinalLoadSimm  # noqa: F401
