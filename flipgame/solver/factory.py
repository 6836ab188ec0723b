"""
Planner Factory Module - Registry and factory for planner instantiation.
"""

from typing import Dict, List, Type, Any

from .base import PhasePlanner
from .board import validate_size


# Global registry of planner classes (classes only, never instances)
_PLANNERS: Dict[str, Type[PhasePlanner]] = {}

DEFAULT_PLANNER = "resumable"


def register_planner(cls: Type[PhasePlanner]) -> Type[PhasePlanner]:
    """
    Decorator to register a planner class.

    Usage:
        @register_planner
        class MyPlanner(PhasePlanner):
            name = "my_planner"
            ...

    Args:
        cls: Planner class to register

    Returns:
        The same class (for decorator chaining)
    """
    _PLANNERS[cls.name] = cls
    return cls


def create_planner(name: str, size: int, **kwargs: Any) -> PhasePlanner:
    """
    Create a planner instance by name.

    Args:
        name: Planner name (e.g., "resumable", "monotonic", "batch")
        size: Board side the planner will work on
        **kwargs: Additional arguments passed to planner constructor

    Returns:
        Planner instance

    Raises:
        ValueError: If size is not an even board side, or the planner
            name is not registered
    """
    # Planners partition the board into N/2 squares; reject odd sides early
    validate_size(size)
    if name not in _PLANNERS:
        available = ", ".join(_PLANNERS.keys())
        raise ValueError(f"Unknown planner: {name}. Available: {available}")
    return _PLANNERS[name](size, **kwargs)


def get_planner_names() -> List[str]:
    """
    Get list of available planner names.

    Returns:
        List of registered planner names
    """
    return list(_PLANNERS.keys())


def get_planner_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered planners.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _PLANNERS.values()
    ]


def get_default_planner_name() -> str:
    """
    Get the default planner name.

    Returns:
        "resumable" if available, else first registered
    """
    if DEFAULT_PLANNER in _PLANNERS:
        return DEFAULT_PLANNER
    if _PLANNERS:
        return next(iter(_PLANNERS.keys()))
    return ""
