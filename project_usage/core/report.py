"""
Usage report shape and formatting.

The report is a flat dict of display strings with a fixed key set, ready to
be embedded in an API response. `networks` is not computed here and keeps
its default.
"""

from typing import Dict

from .entities import InstanceCounts
from .limits import ByteTotal, RawLimitValue
from .printers import PrinterRegistry

REPORT_KEYS = (
    "disk",
    "memory",
    "containers",
    "virtual-machines",
    "cpu",
    "processes",
    "networks",
)

# Report key -> limit key whose printer renders it
LIMIT_REPORT_KEYS = {
    "cpu": "limits.cpu",
    "memory": "limits.memory",
    "processes": "limits.processes",
}


def empty_report() -> Dict[str, str]:
    return {key: "0" for key in REPORT_KEYS}


class ReportFormatter:
    """Turns aggregated values into the string-valued usage report."""

    def __init__(self, printers: PrinterRegistry):
        self.printers = printers

    def format(
        self,
        totals: Dict[str, RawLimitValue],
        disk_bytes: int,
        counts: InstanceCounts
    ) -> Dict[str, str]:
        """
        Build the report.

        Args:
            totals: Limit totaller output for memory, CPU and processes.
            disk_bytes: Volumes + root disks + images, already summed.
            counts: Instance counts by kind.

        Raises:
            PrinterNotFoundError: The registry lacks a required printer.
        """
        # Resolve every printer before rendering anything
        limit_printers = {
            report_key: self.printers.get(limit_key)
            for report_key, limit_key in LIMIT_REPORT_KEYS.items()
        }
        disk_printer = self.printers.get("limits.disk")

        report = empty_report()
        for report_key, printer in limit_printers.items():
            report[report_key] = printer.format(totals[LIMIT_REPORT_KEYS[report_key]])
        report["containers"] = str(counts.containers)
        report["virtual-machines"] = str(counts.virtual_machines)
        report["disk"] = disk_printer.format(ByteTotal(disk_bytes))
        return report
