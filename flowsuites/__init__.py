"""
Flow suites package.

Kept importable so that `run_flow.py`, IDEs and CI jobs can import the
framework and the bundled flows directly.
"""
