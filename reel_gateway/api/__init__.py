"""
FastAPI application layer for the reel gateway.

Exposes HTTP endpoints to submit reel generation requests, poll run status
and probe service health.
"""
