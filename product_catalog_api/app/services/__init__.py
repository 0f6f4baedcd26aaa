"""
Service layer abstraction.

Services encapsulate the business logic of the API.  They work on the
in-memory ``ProductStore`` handed to them, so the storage could be
swapped for a database without changing the API handlers.
"""
