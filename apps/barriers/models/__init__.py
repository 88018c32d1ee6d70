from .diagram import BarrierDiagram, BarrierEnvelope, BarrierElement  # noqa: F401
from .evaluation import (  # noqa: F401
    BarrierStatus,
    BarrierEnvelopeTest,
    BarrierElementTestLink,
    BarrierEnvelopeTestAudit,
    BarrierElementTestLinkAudit,
)
from .annulus import AnnulusElement, AnnulusTest  # noqa: F401
