from project_usage.core.allocations import AllocationCalculator

def get_allocation_calculator() -> AllocationCalculator:
    """Calculator wired with the database-backed collaborators."""
    return AllocationCalculator()
