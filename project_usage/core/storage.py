"""
Storage accounting for a project.

Total disk usage is the sum of three parts:
    - custom volume sizes ("size" config key, human-readable string)
    - instance root disk sizes ("size" attribute of the expanded "root" device)
    - image sizes (already bytes, summed as recorded)

The first volume or instance with a missing or malformed size aborts the
computation with an error naming that entity.
"""

from typing import List, Optional

from .entities import ImageInfo, InstanceInfo, VolumeInfo, root_disk_size
from .exceptions import InvalidSizeError, MissingRootDiskSizeError, MissingVolumeSizeError
from .protocols import ByteSizeParser
from .units import parse_byte_size_string


class StorageAccountant:

    def __init__(self, parser: Optional[ByteSizeParser] = None):
        self.parse = parser or parse_byte_size_string

    def volumes_bytes(self, project_name: str, volumes: List[VolumeInfo]) -> int:
        total = 0
        for volume in volumes:
            size = volume.config.get("size")
            if size is None:
                raise MissingVolumeSizeError(volume.name, project=project_name)

            total += self._parse(size, project_name, volume.name)
        return total

    def root_disks_bytes(self, project_name: str, instances: List[InstanceInfo]) -> int:
        total = 0
        for instance in instances:
            size = root_disk_size(instance)
            if size is None:
                raise MissingRootDiskSizeError(instance.name, project=project_name)

            total += self._parse(size, project_name, instance.name)
        return total

    @staticmethod
    def images_bytes(images: List[ImageInfo]) -> int:
        return sum(image.size for image in images)

    def total_bytes(
        self,
        project_name: str,
        instances: List[InstanceInfo],
        volumes: List[VolumeInfo],
        images: List[ImageInfo]
    ) -> int:
        """
        Compute the project's total storage footprint in bytes.

        Args:
            project_name: Project the entities belong to (used in errors).
            instances: Expanded instances; each needs a sized root device.
            volumes: Custom volumes; each needs a "size" config key.
            images: Project images with their recorded byte sizes.

        Raises:
            MissingVolumeSizeError: A volume has no "size" config key.
            MissingRootDiskSizeError: An instance has no root disk size.
            InvalidSizeError: A size string could not be parsed.
        """
        volumes_total = self.volumes_bytes(project_name, volumes)
        root_disks_total = self.root_disks_bytes(project_name, instances)
        return volumes_total + root_disks_total + self.images_bytes(images)

    def _parse(self, value: str, project_name: str, entity: str) -> int:
        try:
            return self.parse(value)
        except ValueError as e:
            raise InvalidSizeError(value, project=project_name, entity=entity, original_error=e) from e
