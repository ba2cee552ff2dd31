"""Surface HTTP de SpaceTrips (FastAPI)."""
