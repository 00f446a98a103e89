"""
Current allocations of a project.

AllocationCalculator sequences the steps that turn a project's entity
graph into its usage report:

    load -> expand profiles -> {total limits, account storage, count instances} -> format

A project that does not exist has no allocations and yields the all-zero
report. Any failure aborts the call; no partial report is ever returned.

Example Usage:
    with SessionLocal() as session:
        report = get_current_allocations(session, "web")
        report["disk"]  # "7.5GiB"
"""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from project_usage.config import settings
from project_usage.logger import logger
from .classifier import InstanceClassifier
from .exceptions import AllocationError
from .expansion import ProfileExpander
from .limits import ConfigLimitTotaller
from .loader import DatabaseLoader
from .printers import default_printer_registry
from .protocols import ConfigExpander, EntityGraphLoader, LimitTotaller
from .report import ReportFormatter, empty_report
from .storage import StorageAccountant

USAGE_LIMIT_KEYS = ("limits.memory", "limits.cpu", "limits.processes")


class AllocationCalculator:
    """
    Computes a project's current resource usage.

    All collaborators are injected; omitted ones fall back to the
    database-backed defaults.
    """

    def __init__(
        self,
        loader: Optional[EntityGraphLoader] = None,
        expander: Optional[ConfigExpander] = None,
        totaller: Optional[LimitTotaller] = None,
        storage: Optional[StorageAccountant] = None,
        classifier: Optional[InstanceClassifier] = None,
        formatter: Optional[ReportFormatter] = None
    ):
        self.loader = loader or DatabaseLoader()
        self.expander = expander or ProfileExpander()
        self.totaller = totaller or ConfigLimitTotaller()
        self.storage = storage or StorageAccountant()
        self.classifier = classifier or InstanceClassifier()
        self.formatter = formatter or ReportFormatter(default_printer_registry(settings.SIZE_PRECISION))

    def get_current_allocations(self, session: Session, project_name: str) -> Dict[str, str]:
        """
        Return the usage report for `project_name`.

        Args:
            session: Database session valid for the duration of the call.
            project_name: Project to report on.

        Returns:
            Dict with the keys disk, memory, containers, virtual-machines,
            cpu, processes and networks, all strings.

        Raises:
            AllocationError: Missing or malformed sizes, unknown instance
                kinds, bad limit values or missing printers.
            Any loader error (e.g. SQLAlchemyError) unchanged.
        """
        info = self.loader.load(session, project_name, skip_if_no_limits=False)

        # No project, no allocations
        if info is None:
            logger.debug(f"No allocations for unknown project '{project_name}'")
            return empty_report()

        try:
            info = info.with_instances(self.expander.expand(info.instances, info.profiles))
            totals = self.totaller.total(info, USAGE_LIMIT_KEYS)
            disk_bytes = self.storage.total_bytes(info.project, info.instances, info.volumes, info.images)
            counts = self.classifier.count(info.instances, project_name=info.project)
            report = self.formatter.format(totals, disk_bytes, counts)
        except AllocationError as e:
            if e.project is None:
                e.project = info.project
            logger.error(f"Failed to compute allocations for project '{project_name}': {e}")
            raise

        logger.debug(f"Allocations for project '{project_name}': {report}")
        return report


def get_current_allocations(session: Session, project_name: str) -> Dict[str, str]:
    """Compute a project's usage report with the default collaborators."""
    return AllocationCalculator().get_current_allocations(session, project_name)
