"""
Exception types raised by the flow tester framework.

Driver timeouts are not wrapped: Playwright's own ``TimeoutError`` reaches the
flow script unchanged.
"""


class FlowTesterError(Exception):
    """Base class for flow tester errors."""
    pass


class TesterNotReadyError(FlowTesterError):
    """Raised when a tester built without a target URL is used."""
    pass


class UnknownLocatorStrategyError(FlowTesterError, ValueError):
    """Raised for a locator strategy name that has no selector mapping."""
    pass


class ElementNotFoundError(FlowTesterError):
    """Raised when a located element is required but absent from the DOM."""
    pass


__all__ = [
    "FlowTesterError",
    "TesterNotReadyError",
    "UnknownLocatorStrategyError",
    "ElementNotFoundError",
]
