from typing import List, Optional

from .entities import InstanceCounts, InstanceInfo, InstanceType
from .exceptions import UnexpectedInstanceTypeError


class InstanceClassifier:
    """Counts containers and virtual machines, rejecting any other kind."""

    def count(self, instances: List[InstanceInfo], project_name: Optional[str] = None) -> InstanceCounts:
        containers = 0
        virtual_machines = 0
        for instance in instances:
            if instance.type == InstanceType.CONTAINER:
                containers += 1
            elif instance.type == InstanceType.VM:
                virtual_machines += 1
            else:
                # Stored kinds are only ever written as one of the two values
                raise UnexpectedInstanceTypeError(instance.type, instance.name, project=project_name)

        return InstanceCounts(containers=containers, virtual_machines=virtual_machines)
