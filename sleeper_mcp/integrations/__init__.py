"""Upstream API integrations"""
from .sleeper_api import SleeperAPIClient, SleeperAPIError

__all__ = [
    "SleeperAPIClient",
    "SleeperAPIError",
]
