"""Backend package for the RPS Arena API.

This package provides the FastAPI web server that drives a simulation in
a background thread and exposes its read-only state and a few controls.
"""

__version__ = "1.0.0"
