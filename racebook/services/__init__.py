"""Services module"""

from racebook.services.racing_service import RacingService
from racebook.services.sports_service import SportsService

__all__ = [
    "RacingService",
    "SportsService",
]
