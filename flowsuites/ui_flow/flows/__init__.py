"""
Bundled flow scripts.

A flow is an async function that takes a ready FlowTester and runs one or
more begin()/end() tests against its driver.
"""

from .search_flow import search_flow

__all__ = [
    "search_flow",
]
