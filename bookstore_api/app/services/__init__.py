"""
Service layer abstraction.

``EntityStore`` encapsulates the collection rules shared by every
entity.  Endpoints talk to stores only through its public methods, so
the in-memory lists could be swapped for a database without changing
API handlers.
"""
