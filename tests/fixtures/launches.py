"""
Normalized launches for tests that do not go through the SpaceX client.
"""

from typing import Optional

from spacetrips.core.entities.launch import Launch, Mission, Rocket


def make_launch(launch_id: int, mission_name: Optional[str] = None) -> Launch:
    """Build a minimal normalized launch."""
    return Launch(
        id=launch_id,
        site="Kwajalein Atoll",
        mission=Mission(
            name=mission_name or f"Mission {launch_id}",
            mission_patch_small=f"https://images.example/{launch_id}_small.png",
            mission_patch_large=f"https://images.example/{launch_id}.png",
        ),
        rocket=Rocket(id="falcon1", name="Falcon 1", type="Merlin A"),
    )
