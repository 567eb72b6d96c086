"""Data describing a benchmark context and the runs to be reported."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

TOMBSTONE_VALUE = 2**63 - 1
"""Marks a memory statistic that was not measured."""


class TimeUnit(enum.Enum):
    """Unit in which run times are reported."""

    NANOSECOND = ("ns", 1e9)
    MICROSECOND = ("us", 1e6)
    MILLISECOND = ("ms", 1e3)
    SECOND = ("s", 1.0)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def multiplier(self) -> float:
        """Number of units in one second."""
        return self.value[1]


class StatisticUnit(enum.Enum):
    """Unit of an aggregate statistic."""

    TIME = "time"
    PERCENTAGE = "percentage"


class RunType(enum.Enum):
    """Whether a run is a single repetition or an aggregate over several."""

    ITERATION = "iteration"
    AGGREGATE = "aggregate"


class BigO(enum.Enum):
    """Asymptotic complexity of a benchmark."""

    NONE = enum.auto()
    O1 = enum.auto()
    ON = enum.auto()
    ONSQUARED = enum.auto()
    ONCUBED = enum.auto()
    OLOGN = enum.auto()
    ONLOGN = enum.auto()
    AUTO = enum.auto()
    LAMBDA = enum.auto()


class Scaling(enum.Enum):
    """State of CPU frequency scaling."""

    UNKNOWN = enum.auto()
    ENABLED = enum.auto()
    DISABLED = enum.auto()


_BIG_O_STRINGS = {
    BigO.O1: "(1)",
    BigO.ON: "N",
    BigO.ONSQUARED: "N^2",
    BigO.ONCUBED: "N^3",
    BigO.OLOGN: "lgN",
    BigO.ONLOGN: "NlgN",
}


def time_unit_string(unit: TimeUnit) -> str:
    """Return the short label of a time unit, such as ``"ns"``."""
    return unit.label


def big_o_string(complexity: BigO) -> str:
    """Return the printed form of a complexity."""
    return _BIG_O_STRINGS.get(complexity, "f(N)")


@dataclass
class CacheInfo:
    type: str
    level: int
    size: int
    num_sharing: int


@dataclass
class CPUInfo:
    num_cpus: int = 1
    cycles_per_second: float = 1.0
    caches: list[CacheInfo] = field(default_factory=list)
    scaling: Scaling = Scaling.UNKNOWN
    load_avg: list[float] = field(default_factory=list)


@dataclass
class SystemInfo:
    name: str = ""


@dataclass
class Context:
    """Information about the machine and build a report was made on."""

    sys_info: SystemInfo = field(default_factory=SystemInfo)
    cpu_info: CPUInfo = field(default_factory=CPUInfo)
    executable_name: str | None = None
    library_build_type: str = "release"
    global_context: dict[str, str] = field(default_factory=dict)


@dataclass
class MemoryResult:
    num_allocs: int = 0
    max_bytes_used: int = 0
    total_allocated_bytes: int = TOMBSTONE_VALUE
    net_heap_growth: int = TOMBSTONE_VALUE


@dataclass
class Run:
    """The measured result of one benchmark run or aggregate."""

    run_name: str = ""
    family_index: int = 0
    per_family_instance_index: int = 0
    run_type: RunType = RunType.ITERATION
    repetitions: int = 1
    repetition_index: int = 0
    threads: int = 1
    aggregate_name: str = ""
    aggregate_unit: StatisticUnit = StatisticUnit.TIME
    error_occurred: bool = False
    error_message: str = ""
    iterations: int = 1
    time_unit: TimeUnit = TimeUnit.NANOSECOND
    real_accumulated_time: float = 0.0
    cpu_accumulated_time: float = 0.0
    report_big_o: bool = False
    report_rms: bool = False
    complexity: BigO = BigO.NONE
    counters: dict[str, float] = field(default_factory=dict)
    memory_result: MemoryResult | None = None
    allocs_per_iter: float = 0.0
    report_label: str = ""

    def benchmark_name(self) -> str:
        """Run name, with the aggregate name appended for aggregates."""
        if self.run_type is RunType.AGGREGATE:
            return f"{self.run_name}_{self.aggregate_name}"
        return self.run_name

    def _adjusted(self, seconds: float) -> float:
        value = seconds * self.time_unit.multiplier
        if self.iterations != 0:
            value /= self.iterations
        return value

    def adjusted_real_time(self) -> float:
        """Real time per iteration in the run's time unit."""
        return self._adjusted(self.real_accumulated_time)

    def adjusted_cpu_time(self) -> float:
        """CPU time per iteration in the run's time unit."""
        return self._adjusted(self.cpu_accumulated_time)