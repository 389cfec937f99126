"""
================================================================================
Run Record
================================================================================

In-memory tally of one flow run: how many tests finished, in which order,
and with which verdict.

A TestRun is owned by whoever drives the run and handed to the FlowTester,
so two testers in one process never share a sequence counter.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


def format_sequence(sequence: int) -> str:
    """Zero-pad a sequence number to (at least) two digits."""
    return f"{sequence:02d}"


@dataclass
class TestRecord:
    """
    One finished test.

    Attributes:
        sequence: 1-based completion order within the run
        title: Test title active when the verdict was given
        passed: Verdict
    """
    __test__ = False

    sequence: int
    title: str
    passed: bool

    @property
    def badge(self) -> str:
        return "PASS" if self.passed else "FAIL"

    @property
    def line(self) -> str:
        """Plain status line, e.g. ' PASS  [01] Search Google'."""
        return f" {self.badge}  [{format_sequence(self.sequence)}] {self.title}"

    @property
    def markup(self) -> str:
        """
        Status line template in loguru colour markup.

        The title slot is "{}" so the title is passed as a log argument and
        never parsed as markup.
        """
        if self.passed:
            badge = "<black><GREEN> PASS </GREEN></black>"
            color = "green"
        else:
            badge = "<black><RED> FAIL </RED></black>"
            color = "red"
        return f"{badge} [{format_sequence(self.sequence)}] <{color}>{{}}</{color}>"


@dataclass
class TestRun:
    """
    Sequence counter and result log of one run.

    Attributes:
        sequence_count: Number of finished tests
        result_log: Plain status lines in completion order
        records: Structured form of result_log
    """
    __test__ = False

    sequence_count: int = 0
    result_log: List[str] = field(default_factory=list)
    records: List[TestRecord] = field(default_factory=list)

    def record(self, title: str, passed: bool) -> TestRecord:
        """Count a finished test and append its status line."""
        self.sequence_count += 1
        entry = TestRecord(sequence=self.sequence_count, title=title, passed=bool(passed))
        self.records.append(entry)
        self.result_log.append(entry.line)
        return entry

    @property
    def passed(self) -> int:
        return sum(1 for r in self.records if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.records if not r.passed)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def summary(self) -> Dict[str, int]:
        return {
            "total": self.sequence_count,
            "passed": self.passed,
            "failed": self.failed,
        }


__all__ = [
    "TestRecord",
    "TestRun",
    "format_sequence",
]
