from pydantic import BaseModel
from typing import Dict

class ProjectStateResponse(BaseModel):
    project: str
    resources: Dict[str, str]  # disk, memory, containers, virtual-machines, cpu, processes, networks
