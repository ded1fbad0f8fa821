"""Guide store access and seeding."""

from .seeder import SeedReport, seed_guides
from .service import GuideService

__all__ = ["GuideService", "SeedReport", "seed_guides"]
