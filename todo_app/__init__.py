"""
Todo App

Console task list plus a small movie/weather HTTP API.
"""

__version__ = "1.0.0"
