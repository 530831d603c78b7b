"""
API route handlers for the endpoint groups (health, reels, runs).
"""
