"""
Reservation entities.

Local, mutable records owned by the reservation store: users and the
trips (bookings) joining a user to a launch.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Application user.

    Created lazily on the first authenticated request for an email.

    Attributes:
        id: Store-assigned identifier
        email: Unique email address
        created_at: Creation timestamp
    """

    id: Optional[int] = None
    email: str = ""
    created_at: Optional[datetime] = None


@dataclass
class Trip:
    """
    Booking of a seat on a launch by a user.

    A trip existing for the (user_id, launch_id) pair is what makes the
    launch "booked" for that user.

    Attributes:
        id: Store-assigned identifier
        user_id: Owner of the booking
        launch_id: Flight number of the booked launch
        created_at: Booking timestamp
    """

    id: Optional[int] = None
    user_id: int = 0
    launch_id: int = 0
    created_at: Optional[datetime] = None
