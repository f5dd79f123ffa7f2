"""
walletgate_demo.models — Storefront data models.

Re-exports the main classes for convenience:
    from walletgate_demo.models import CheckDescriptor, SessionResponse
"""

from walletgate_demo.models.enums import (  # noqa: F401
    Category,
    CheckType,
    CodeLang,
    SessionStatus,
    SimulationOutcome,
    View,
)
from walletgate_demo.models.checks import CheckDescriptor, CheckRequirementInput  # noqa: F401
from walletgate_demo.models.product import (  # noqa: F401
    PriceBreakdown,
    Product,
    ProductDetail,
    ProductRequirements,
    RequirementLine,
)
from walletgate_demo.models.session import (  # noqa: F401
    CheckoutStarted,
    SessionResponse,
    SimulateRequest,
    TimedSession,
)
