"""
Per-kind raw limit values and the default limit totaller.

Aggregated limits are not all plain numbers: memory is a byte total,
processes is a count, and CPU may mix plain counts with pinned core sets.
Each kind therefore has its own frozen value type, and printers match on
the type they expect.

    ByteTotal   - limits.memory
    CountTotal  - limits.processes
    CpuTotal    - limits.cpu (plain count plus pinned core sets)
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, NamedTuple, Optional, Tuple, Union

from .entities import ProjectInfo
from .exceptions import InvalidLimitValueError, UnknownLimitKeyError
from .units import parse_byte_size_string


@dataclass(frozen=True)
class ByteTotal:
    bytes: int = 0

    def __add__(self, other: "ByteTotal") -> "ByteTotal":
        return ByteTotal(self.bytes + other.bytes)


@dataclass(frozen=True)
class CountTotal:
    count: int = 0

    def __add__(self, other: "CountTotal") -> "CountTotal":
        return CountTotal(self.count + other.count)


@dataclass(frozen=True)
class CpuTotal:
    """
    CPU allotment across instances.

    Attributes:
        count: Sum of plain CPU counts ("limits.cpu": "2")
        pinned: One core set per instance pinned with a cpuset ("0-3,6")
    """
    count: int = 0
    pinned: Tuple[FrozenSet[int], ...] = ()

    def __add__(self, other: "CpuTotal") -> "CpuTotal":
        return CpuTotal(self.count + other.count, self.pinned + other.pinned)

    @property
    def allotment(self) -> int:
        return self.count + sum(len(cores) for cores in self.pinned)


RawLimitValue = Union[ByteTotal, CountTotal, CpuTotal]

# Highest core id a cpuset may name
MAX_CPU_ID = 65535

_DIGITS = re.compile(r"[0-9]+")


def parse_count(value: str) -> int:
    """Parse a non-negative decimal integer made of ASCII digits only."""
    if not _DIGITS.fullmatch(value):
        raise ValueError(f"Invalid integer '{value}'")
    return int(value)


def parse_memory_limit(value: str) -> ByteTotal:
    if value.strip().endswith("%"):
        raise ValueError("Value can't be a percentage")
    return ByteTotal(parse_byte_size_string(value))


def parse_processes_limit(value: str) -> CountTotal:
    if value.startswith("-"):
        raise ValueError("Value can't be negative")
    return CountTotal(parse_count(value))


def parse_cpuset(value: str) -> FrozenSet[int]:
    """
    Parse a cpuset such as "0-3,6" into the set of core ids it names.

    Raises:
        ValueError: If a chunk is not a core id or an ascending range, or
            names a core above MAX_CPU_ID.
    """
    cores = set()
    for chunk in value.split(","):
        if "-" in chunk:
            start, end = (parse_count(part) for part in chunk.split("-", 1))
            if end < start:
                raise ValueError(f"Invalid cpu range '{chunk}'")
        else:
            start = end = parse_count(chunk)

        if end > MAX_CPU_ID:
            raise ValueError(f"Cpu id above {MAX_CPU_ID} in '{chunk}'")
        cores.update(range(start, end + 1))
    return frozenset(cores)


def parse_cpu_limit(value: str) -> CpuTotal:
    if "," in value or "-" in value:
        return CpuTotal(pinned=(parse_cpuset(value),))

    return CpuTotal(count=parse_count(value))


class LimitParser(NamedTuple):
    parse: Callable[[str], RawLimitValue]
    zero: RawLimitValue


LIMIT_PARSERS: Dict[str, LimitParser] = {
    "limits.memory": LimitParser(parse_memory_limit, ByteTotal()),
    "limits.processes": LimitParser(parse_processes_limit, CountTotal()),
    "limits.cpu": LimitParser(parse_cpu_limit, CpuTotal()),
}


class ConfigLimitTotaller:
    """
    Sums limits.* values across a project's expanded instances.

    Instances that leave a limit unset (or empty) contribute nothing to it.
    The first malformed value aborts the whole computation.
    """

    def __init__(self, parsers: Optional[Dict[str, LimitParser]] = None):
        self._parsers = dict(LIMIT_PARSERS if parsers is None else parsers)

    def total(self, info: ProjectInfo, keys: Iterable[str]) -> Dict[str, RawLimitValue]:
        """
        Aggregate each requested limit key across all instances of the project.

        Args:
            info: Project snapshot whose instances are already expanded.
            keys: Limit keys such as "limits.memory".

        Returns:
            Mapping from each key to its typed aggregate.

        Raises:
            UnknownLimitKeyError: If a key has no parser.
            InvalidLimitValueError: If an instance carries a malformed value.
        """
        keys = list(keys)
        for key in keys:
            if key not in self._parsers:
                raise UnknownLimitKeyError(key, sorted(self._parsers), project=info.project)

        totals = {key: self._parsers[key].zero for key in keys}
        for instance in info.instances:
            for key in keys:
                value = instance.config.get(key, "")
                if value == "":
                    continue

                try:
                    limit = self._parsers[key].parse(value)
                except ValueError as e:
                    raise InvalidLimitValueError(
                        key, value, str(e), instance_name=instance.name, project=info.project
                    ) from e

                totals[key] = totals[key] + limit

        return totals
