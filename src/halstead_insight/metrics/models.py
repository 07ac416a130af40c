"""Data models for per-file metric results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Set

GLOBAL_SCOPE = "GLOBAL"

# Software Science constants: Stroud number and bugs-per-volume divisor
HALSTEAD_SECONDS_DIVISOR = 18
HALSTEAD_BUGS_DIVISOR = 3000


@dataclass(frozen=True)
class LineCounts:
    """Line classification of one file. total == blank + comment + code."""

    blank: int = 0
    comment: int = 0
    code: int = 0

    @property
    def total(self) -> int:
        return self.blank + self.comment + self.code


@dataclass(frozen=True)
class HalsteadTally:
    """Operator/operand counts of one file and the Software Science measures.

    Attributes:
        n1: Distinct operators
        n2: Distinct operands
        N1: Total operator occurrences
        N2: Total operand occurrences
    """

    n1: int = 0
    n2: int = 0
    N1: int = 0
    N2: int = 0

    @property
    def vocabulary(self) -> int:
        return self.n1 + self.n2

    @property
    def length(self) -> int:
        return self.N1 + self.N2

    @property
    def volume(self) -> float:
        """N * log2(n), 0 for an empty vocabulary."""
        if self.vocabulary == 0:
            return 0.0
        return self.length * math.log2(self.vocabulary)

    @property
    def difficulty(self) -> float:
        """(n1 / 2) * (N2 / n2), 0 when there are no operands."""
        if self.n2 == 0:
            return 0.0
        return (self.n1 / 2) * (self.N2 / self.n2)

    @property
    def effort(self) -> float:
        return self.volume * self.difficulty

    @property
    def time(self) -> float:
        """Estimated implementation time in seconds."""
        return self.effort / HALSTEAD_SECONDS_DIVISOR

    @property
    def bugs(self) -> float:
        """Estimated delivered bugs."""
        return self.volume / HALSTEAD_BUGS_DIVISOR


@dataclass
class FunctionNode:
    """A function in the call graph of one file.

    Attributes:
        name: Declared name, property key for methods, or a synthesized
            ``anonymous@<offset>`` / ``arrow@<offset>`` for anonymous ones
        fan_in: Names of the functions calling this one
        fan_out: Names of the functions this one calls
    """

    name: str
    fan_in: Set[str] = field(default_factory=set)
    fan_out: Set[str] = field(default_factory=set)

    @property
    def information_flow(self) -> int:
        return len(self.fan_in) * len(self.fan_out)


@dataclass
class InformationFlow:
    """Fan-in/fan-out summary of one file's call graph."""

    functions: Dict[str, FunctionNode] = field(default_factory=dict)

    def _real_functions(self):
        return [f for name, f in self.functions.items() if name != GLOBAL_SCOPE]

    @property
    def function_count(self) -> int:
        return len(self._real_functions())

    @property
    def total_fan_in(self) -> int:
        return sum(len(f.fan_in) for f in self._real_functions())

    @property
    def total_fan_out(self) -> int:
        return sum(len(f.fan_out) for f in self._real_functions())

    @property
    def total_information_flow(self) -> int:
        return sum(f.information_flow for f in self._real_functions())

    @property
    def grand_total(self) -> int:
        return self.total_fan_in + self.total_fan_out + self.total_information_flow

    @property
    def average_fan_in(self) -> float:
        count = self.function_count
        return self.total_fan_in / count if count else 0.0

    @property
    def average_fan_out(self) -> float:
        count = self.function_count
        return self.total_fan_out / count if count else 0.0


@dataclass(frozen=True)
class VariableUsage:
    """Declared vs. referenced names of one file.

    ``live`` is the set of declared names that are referenced anywhere.
    This is a declared-and-used count, not dataflow liveness.
    """

    declared: frozenset = frozenset()
    referenced: frozenset = frozenset()

    @property
    def live(self) -> frozenset:
        return self.declared & self.referenced

    @property
    def declared_count(self) -> int:
        return len(self.declared)

    @property
    def live_count(self) -> int:
        return len(self.live)


@dataclass
class FileMetrics:
    """Everything measured for one file.

    Tree-derived fields are None when the file is size-only or failed to parse.
    """

    path: Path
    lines: LineCounts
    language: Optional[str] = None
    halstead: Optional[HalsteadTally] = None
    cyclomatic: Optional[int] = None
    information_flow: Optional[InformationFlow] = None
    variables: Optional[VariableUsage] = None

    @property
    def is_script(self) -> bool:
        return self.language is not None

    @property
    def parsed(self) -> bool:
        return self.halstead is not None
