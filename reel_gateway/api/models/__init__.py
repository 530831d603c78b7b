"""
Pydantic models for API request/response schemas.

These models define the shape of data exchanged with callers. They are kept
separate from the internal run and bus types to maintain clear API boundaries.
"""
