from project_usage.schemas.project import ProjectStateResponse

__all__ = ["ProjectStateResponse"]
