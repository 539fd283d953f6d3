"""
Service layer abstraction.

Services sit between the HTTP endpoints and the record store.  Each
service call maps to exactly one store operation.
"""
