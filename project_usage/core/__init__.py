"""
Allocation accounting core.

Computes a project's current resource usage (disk, memory, CPU, processes,
instance counts) from its instances, profiles, custom volumes and images.

Modules:
    entities: Frozen snapshots of the project entity graph
    protocols: Interfaces of the collaborators (loader, expander, totaller, ...)
    loader: SQLAlchemy-backed entity graph loader
    expansion: Profile inheritance for instance config and devices
    limits: Typed limit aggregates and the limit totaller
    units: Byte-size parsing and rendering
    printers: Per-limit printers and the immutable printer registry
    storage: Volume, root disk and image accounting
    classifier: Instance counts by kind
    report: Report keys and the report formatter
    allocations: AllocationCalculator, the pipeline entry point
    exceptions: AllocationError hierarchy

Usage:
    from project_usage.core.allocations import get_current_allocations

    report = get_current_allocations(session, "web")

Models import entities, so the loader-dependent modules are not re-exported.
"""

from .entities import (
    InstanceType, InstanceInfo, ProfileInfo, VolumeInfo, ImageInfo, ProjectInfo, InstanceCounts
)
from .exceptions import (
    AllocationError, MissingSizeError, MissingVolumeSizeError, MissingRootDiskSizeError,
    InvalidSizeError, UnexpectedInstanceTypeError, InvalidLimitValueError,
    UnknownLimitKeyError, PrinterNotFoundError
)

__all__ = [
    "InstanceType", "InstanceInfo", "ProfileInfo", "VolumeInfo", "ImageInfo",
    "ProjectInfo", "InstanceCounts",
    "AllocationError", "MissingSizeError", "MissingVolumeSizeError",
    "MissingRootDiskSizeError", "InvalidSizeError", "UnexpectedInstanceTypeError",
    "InvalidLimitValueError", "UnknownLimitKeyError", "PrinterNotFoundError",
]
