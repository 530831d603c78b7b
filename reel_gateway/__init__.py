"""
Reel Gateway: HTTP intake for reel generation runs.

Accepts reel creation requests, assigns each a run identifier, queues the
request for the downstream orchestrator and serves run status lookups.
"""

__version__ = "1.0.0"
