"""
FastAPI dependencies for request processing.

Dependencies provide the shared services (publisher, run store, settings)
that are injected into API endpoints.
"""
