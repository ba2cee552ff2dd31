"""
Launch entities.

Entities representing the scheduled launches served by the remote
SpaceX catalog. They are normalized copies: the catalog provider owns
the records and this application never mutates them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from spacetrips.core.value_objects.patch_size import PatchSize


@dataclass
class Mission:
    """
    Mission flown by a launch.

    Attributes:
        name: Mission name
        mission_patch_small: URL of the small mission patch image
        mission_patch_large: URL of the full size mission patch image
    """

    name: Optional[str] = None
    mission_patch_small: Optional[str] = None
    mission_patch_large: Optional[str] = None

    def patch(self, size: PatchSize = PatchSize.LARGE) -> Optional[str]:
        """Return the mission patch URL for the requested size."""
        if size is PatchSize.SMALL:
            return self.mission_patch_small
        return self.mission_patch_large


@dataclass
class Rocket:
    """
    Rocket used by a launch.

    Attributes:
        id: Rocket identifier from the catalog (ex: "falcon9")
        name: Display name (ex: "Falcon 9")
        type: Rocket type (ex: "FT")
    """

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


@dataclass
class Launch:
    """
    Scheduled rocket flight.

    Identity is the flight number. Launches are totally ordered by
    flight number for pagination purposes.

    Attributes:
        id: Flight number
        site: Launch site name
        launch_date: Launch date (UTC) when known
        mission: Mission details
        rocket: Rocket details
    """

    id: int
    site: Optional[str] = None
    launch_date: Optional[datetime] = None
    mission: Mission = field(default_factory=Mission)
    rocket: Rocket = field(default_factory=Rocket)

    @property
    def cursor(self) -> str:
        """Opaque pagination marker for this launch."""
        return str(self.id)
