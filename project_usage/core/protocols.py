"""
Protocol definitions for the collaborators of the allocation calculator.

The calculator only sequences these steps; loading, profile expansion,
limit totalling, size parsing and value rendering are supplied from outside
and can be swapped for stubs in tests. Using Protocol (structural subtyping)
means implementations do not need to inherit from anything.

Default implementations:
    EntityGraphLoader -> loader.DatabaseLoader
    ConfigExpander    -> expansion.ProfileExpander
    LimitTotaller     -> limits.ConfigLimitTotaller
    ByteSizeParser    -> units.parse_byte_size_string
    LimitPrinter      -> printers.BytesPrinter / CountPrinter / CpuPrinter
"""

from typing import Protocol, runtime_checkable, Dict, Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from .entities import InstanceInfo, ProfileInfo, ProjectInfo
    from .limits import RawLimitValue


@runtime_checkable
class EntityGraphLoader(Protocol):
    """Reads one project's entity graph from storage."""

    def load(
        self,
        session: 'Session',
        project_name: str,
        skip_if_no_limits: bool = False
    ) -> Optional['ProjectInfo']:
        """
        Load the project snapshot.

        Args:
            session: Database session valid for the duration of the call.
            project_name: Name of the project to load.
            skip_if_no_limits: Return None for projects without any
                limits.* config key.

        Returns:
            The snapshot, or None when the project does not exist.
        """
        ...


@runtime_checkable
class ConfigExpander(Protocol):
    """Applies profile inheritance to instances."""

    def expand(
        self,
        instances: List['InstanceInfo'],
        profiles: List['ProfileInfo']
    ) -> List['InstanceInfo']:
        """Return instances whose config and devices are the effective values."""
        ...


@runtime_checkable
class LimitTotaller(Protocol):
    """Aggregates configured limits across a project's instances."""

    def total(self, info: 'ProjectInfo', keys: Iterable[str]) -> Dict[str, 'RawLimitValue']:
        ...


@runtime_checkable
class ByteSizeParser(Protocol):
    """Callable turning a size string like "10GB" into bytes."""

    def __call__(self, value: str) -> int:
        ...


@runtime_checkable
class LimitPrinter(Protocol):
    """Renders one aggregated limit value for display."""

    def format(self, raw: 'RawLimitValue') -> str:
        ...
