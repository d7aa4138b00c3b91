"""In-memory storage package."""

from .launch_repository import InMemoryLaunchRepository
from .seed_loader import SeedDataError, load_seed_records

__all__ = ["InMemoryLaunchRepository", "SeedDataError", "load_seed_records"]
