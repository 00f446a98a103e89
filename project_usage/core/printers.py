"""
Printers and the printer registry.

A printer turns one aggregated raw value into its display string. The
registry maps limit keys to printers and is immutable once built; the
report formatter receives it at construction instead of reading shared
module state.

    registry = default_printer_registry(precision=1)
    registry.get("limits.memory").format(ByteTotal(2147483648))  # "2.0GiB"
"""

from types import MappingProxyType
from typing import Dict, Mapping

from .exceptions import PrinterNotFoundError
from .limits import ByteTotal, CountTotal, CpuTotal, RawLimitValue
from .protocols import LimitPrinter
from .units import get_byte_size_string_iec


def _expect(raw: RawLimitValue, kind: type) -> None:
    if not isinstance(raw, kind):
        raise TypeError(f"Expected {kind.__name__}, got {type(raw).__name__}")


class BytesPrinter:
    """Renders byte totals with binary units ("7.5GiB")."""

    def __init__(self, precision: int = 1):
        self.precision = precision

    def format(self, raw: RawLimitValue) -> str:
        _expect(raw, ByteTotal)
        return get_byte_size_string_iec(raw.bytes, self.precision)


class CountPrinter:
    def format(self, raw: RawLimitValue) -> str:
        _expect(raw, CountTotal)
        return str(raw.count)


class CpuPrinter:
    """Renders the CPU allotment: plain counts plus the size of each pinned core set."""

    def format(self, raw: RawLimitValue) -> str:
        _expect(raw, CpuTotal)
        return str(raw.allotment)


class PrinterRegistry:
    """
    Read-only mapping from limit key to printer.

    Example Usage:
        registry = PrinterRegistry({"limits.processes": CountPrinter()})
        registry.get("limits.processes").format(CountTotal(12))  # "12"

        # Extending returns a new registry, the original is unchanged
        wider = registry.with_printer("limits.cpu", CpuPrinter())
    """

    def __init__(self, printers: Mapping[str, LimitPrinter]):
        self._printers = MappingProxyType(dict(printers))

    def get(self, key: str) -> LimitPrinter:
        """
        Return the printer registered for `key`.

        Raises:
            PrinterNotFoundError: If no printer is registered for that key.
        """
        if key not in self._printers:
            raise PrinterNotFoundError(key, self.keys())
        return self._printers[key]

    def format(self, key: str, raw: RawLimitValue) -> str:
        return self.get(key).format(raw)

    def with_printer(self, key: str, printer: LimitPrinter) -> "PrinterRegistry":
        printers: Dict[str, LimitPrinter] = dict(self._printers)
        printers[key] = printer
        return PrinterRegistry(printers)

    def keys(self) -> list[str]:
        return sorted(self._printers.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._printers


def default_printer_registry(precision: int = 1) -> PrinterRegistry:
    """Registry with a printer for every limit key the report needs."""
    return PrinterRegistry({
        "limits.cpu": CpuPrinter(),
        "limits.processes": CountPrinter(),
        "limits.memory": BytesPrinter(precision),
        "limits.disk": BytesPrinter(precision),
    })
