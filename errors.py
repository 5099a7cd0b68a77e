"""Exception types raised by the BuildGate pipeline.

Only these abort a run; every other failure mode (bad plan, contract
violations, low score) is recovered inside the retry loop.
"""


class BuildGateError(Exception):
    """Base class for fatal pipeline errors."""


class BrandEnforcementError(BuildGateError):
    """The style decision is missing or incomplete. Raised before any generation call."""


class OutputParseError(BuildGateError):
    """The provider response could not be parsed into an output, even after a repair call."""
