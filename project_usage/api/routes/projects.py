"""
Project state endpoint.

Returns the current resource usage of a project:
- Disk (custom volumes + root disks + images)
- Memory, CPU and process limits summed across instances
- Container and virtual-machine counts
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from project_usage.models.database import get_db
from project_usage.api.dependencies import get_allocation_calculator
from project_usage.core.allocations import AllocationCalculator
from project_usage.core.exceptions import AllocationError
from project_usage.schemas.project import ProjectStateResponse
from project_usage.logger import logger

router = APIRouter(prefix="/projects", tags=["projects"])

@router.get("/{project_name}/state", response_model=ProjectStateResponse)
def get_project_state(
    project_name: str,
    db: Session = Depends(get_db),
    calculator: AllocationCalculator = Depends(get_allocation_calculator)
):
    """Get current allocations for a project. Unknown projects report zero usage."""
    try:
        resources = calculator.get_current_allocations(db, project_name)
    except AllocationError as e:
        logger.error(str(e))
        raise HTTPException(status_code=500, detail=str(e))

    return ProjectStateResponse(project=project_name, resources=resources)
