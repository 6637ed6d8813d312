"""
Service layer.

Services hold the business logic and are the only code that talks to
the store, so the flat JSON file can be swapped for a database without
touching the API handlers.
"""
