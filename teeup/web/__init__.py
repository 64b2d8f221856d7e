"""
Web interface module for teeup.

Provides a FastAPI JSON API for running draws.
"""
