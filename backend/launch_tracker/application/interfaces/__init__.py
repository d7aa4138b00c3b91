from .launch_repository import LaunchRepository

__all__ = [
    "LaunchRepository",
]
