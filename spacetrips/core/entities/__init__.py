"""
Business entities representing core domain concepts.

Exports:
- Launch: A scheduled rocket flight from the remote catalog (read-only)
- Mission: Mission name and patch images of a launch
- Rocket: Rocket identity of a launch
- User: A local user, unique by email
- Trip: A booking joining a User and a Launch
"""

from spacetrips.core.entities.launch import Launch, Mission, Rocket
from spacetrips.core.entities.reservation import Trip, User

__all__ = [
    "Launch",
    "Mission",
    "Rocket",
    "User",
    "Trip",
]
