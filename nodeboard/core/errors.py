"""Error types raised while onboarding a machine."""

from enum import Enum


class IdentityErrorKind(str, Enum):
    """Which piece of network identity could not be found."""

    EMPTY_MAC_ADDRESS = "MAC Address is empty"
    EMPTY_IP_ADDRESS = "IP Address is empty"


class OnboardError(Exception):
    """Base class for every failure that aborts an onboarding run."""


class NetworkQueryError(OnboardError):
    """The host's interface or address list could not be retrieved."""


class IdentityNotFoundError(OnboardError):
    """No interface or address qualified for identity resolution."""

    def __init__(self, kind: IdentityErrorKind):
        self.kind = kind
        super().__init__(kind.value)


class InvalidTokenError(OnboardError):
    """The registration token is missing, blank or left at its default."""


class ReportError(OnboardError):
    """The system info could not be encoded or delivered to the server."""
