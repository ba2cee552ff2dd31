"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- identity: credential encoding and per-request user resolution
- reservation_store: user and trip records over the repositories
- booking: multi-launch booking and cancellation with partial failure
"""
