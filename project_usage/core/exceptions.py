"""
Custom exceptions for project allocation accounting.

Every failure raised while computing a project's usage report derives from
AllocationError so callers can translate the whole family into a single
user-facing failure. A failed call never yields a partial report.

Exception Hierarchy:
    AllocationError (base)
    ├── MissingSizeError - Required size setting absent
    │   ├── MissingVolumeSizeError - Volume without a "size" config key
    │   └── MissingRootDiskSizeError - Instance root device without "size"
    ├── InvalidSizeError - Size string that cannot be parsed
    ├── UnexpectedInstanceTypeError - Instance kind is neither container nor VM
    ├── InvalidLimitValueError - Malformed limits.* value on an instance
    ├── UnknownLimitKeyError - Totals requested for an unsupported limit key
    └── PrinterNotFoundError - No printer registered for a limit key
"""

from typing import Optional


class AllocationError(Exception):
    """
    Base exception for all allocation-accounting errors.

    Attributes:
        message: Human-readable error description
        project: Optional project name the error belongs to
        entity: Optional name of the instance/volume that failed
    """

    def __init__(
        self,
        message: str,
        project: Optional[str] = None,
        entity: Optional[str] = None
    ):
        self.message = message
        self.project = project
        self.entity = entity
        super().__init__(message)

    def __str__(self) -> str:
        # project may be set after construction
        details = []
        if self.project:
            details.append(f"project={self.project}")
        if self.entity:
            details.append(f"entity={self.entity}")

        if details:
            return f"{self.message} [{', '.join(details)}]"
        return self.message


class MissingSizeError(AllocationError):
    """Raised when a volume or instance lacks its required size setting."""


class MissingVolumeSizeError(MissingSizeError):
    """
    Raised when a custom volume has no "size" config key.

    Example:
        >>> accountant.total_bytes("web", [], [VolumeInfo("data", {})], [])
        MissingVolumeSizeError: Unable to determine volume state on volume 'data' with no size config key [project=web, entity=data]
    """

    def __init__(self, volume_name: str, project: Optional[str] = None):
        self.volume_name = volume_name
        message = f"Unable to determine volume state on volume '{volume_name}' with no size config key"
        super().__init__(message, project=project, entity=volume_name)


class MissingRootDiskSizeError(MissingSizeError):
    """Raised when an expanded instance has no root device or the root device has no size."""

    def __init__(self, instance_name: str, project: Optional[str] = None):
        self.instance_name = instance_name
        message = f"Failed to get root disk size for instance '{instance_name}' in project '{project}'"
        super().__init__(message, project=project, entity=instance_name)


class InvalidSizeError(AllocationError):
    """
    Raised when a size string fails to parse.

    The underlying parse failure is kept as `original_error` and chained
    as `__cause__` by the raiser.
    """

    def __init__(
        self,
        value: str,
        project: Optional[str] = None,
        entity: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.value = value
        self.original_error = original_error

        message = f"Failed to determine disk usage from size '{value}'"
        if original_error:
            message += f": {str(original_error)}"

        super().__init__(message, project=project, entity=entity)


class UnexpectedInstanceTypeError(AllocationError):
    """
    Raised when an instance kind is neither a container nor a virtual machine.

    This points at corrupted data upstream rather than at user input.
    """

    def __init__(self, instance_type: object, instance_name: Optional[str] = None, project: Optional[str] = None):
        self.instance_type = instance_type
        message = f"Unexpected instance type '{instance_type}'"
        super().__init__(message, project=project, entity=instance_name)


class InvalidLimitValueError(AllocationError):
    """Raised when an instance carries a limits.* value that cannot be totalled."""

    def __init__(
        self,
        key: str,
        value: str,
        reason: str,
        instance_name: Optional[str] = None,
        project: Optional[str] = None
    ):
        self.key = key
        self.value = value
        self.reason = reason
        message = f"Invalid value '{value}' for '{key}': {reason}"
        super().__init__(message, project=project, entity=instance_name)


class UnknownLimitKeyError(AllocationError):
    """Raised when totals are requested for a limit key without a parser."""

    def __init__(self, key: str, available_keys: list[str], project: Optional[str] = None):
        self.key = key
        self.available_keys = available_keys
        message = f"Limit '{key}' cannot be totalled. Available: {available_keys}"
        super().__init__(message, project=project)


class PrinterNotFoundError(AllocationError):
    """
    Raised when the printer registry has no entry for a limit key.

    This is a wiring mistake, never a user error.
    """

    def __init__(self, key: str, available_keys: list[str], project: Optional[str] = None):
        self.key = key
        self.available_keys = available_keys
        message = (
            f"Printer for '{key}' not found. "
            f"Available: {available_keys}"
        )
        super().__init__(message, project=project)
