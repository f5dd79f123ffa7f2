"""
walletgate_demo/models/enums.py — Storefront enumerations.

Contains:
    • CheckType — verification check requested from WalletGate
    • SessionStatus — remote verification session status
    • View — storefront view state (store / checkout / result)
    • Category — catalogue category filter
    • SimulationOutcome — demo outcome forced through /simulate
    • CodeLang — language of a generated integration snippet
"""

from enum import Enum


class CheckType(str, Enum):
    """Verification check understood by the WalletGate API."""
    AGE_OVER = "age_over"
    RESIDENCY_EU = "residency_eu"
    IDENTITY_VERIFIED = "identity_verified"


class SessionStatus(str, Enum):
    """Status of a remote verification session."""
    IDLE = "idle"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @property
    def is_active(self) -> bool:
        """The session is waiting for the wallet and should be polled."""
        return self in ACTIVE_STATUSES


TERMINAL_STATUSES = frozenset(
    {SessionStatus.COMPLETED, SessionStatus.FAILED, SessionStatus.EXPIRED}
)
ACTIVE_STATUSES = frozenset({SessionStatus.PENDING, SessionStatus.IN_PROGRESS})


class View(str, Enum):
    """Storefront view currently shown to the visitor."""
    STORE = "store"
    CHECKOUT = "checkout"
    RESULT = "result"


class Category(str, Enum):
    """Catalogue category; ALL disables filtering."""
    ALL = "All"
    ALCOHOL = "Alcohol"
    WELLNESS = "Wellness"
    EVENTS = "Events"
    GAMING = "Gaming"
    FINANCE = "Finance"


class SimulationOutcome(str, Enum):
    """Outcome forced on a demo session."""
    PASS_ALL = "pass_all"
    FAIL_ALL = "fail_all"
    MIXED = "mixed"


class CodeLang(str, Enum):
    """Target ecosystem of an integration snippet."""
    NODE = "node"
    PYTHON = "python"
    CURL = "curl"
    RUBY = "ruby"
    GO = "go"
    JAVA = "java"
    KOTLIN = "kotlin"
