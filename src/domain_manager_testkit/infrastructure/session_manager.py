#!/usr/bin/env python3
"""
Session manager for profile-based AWS credentials.

Caches one boto3 session per (profile, region) pair, and one client per
service on top of it, so repeated lookups during a test run reuse the same
credentials.
"""

import logging
import threading
from typing import Any, Optional

import boto3

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "session_manager",
        "description": "Session manager for profile-based AWS credentials",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class SessionManager:
    """Creates and caches boto3 sessions.

    This class is thread-safe; lookups run boto3 calls in worker threads.
    """

    def __init__(self) -> None:
        """Initialize the session manager."""
        self._sessions: dict[tuple[Optional[str], str], boto3.Session] = {}
        self._clients: dict[tuple[str, Optional[str], str], Any] = {}
        self._session_lock = threading.Lock()

    def get_session(self, region: str, profile: Optional[str] = None) -> boto3.Session:
        """Get or create a boto3 session for a profile and region.

        Args:
            region: AWS region
            profile: Shared credentials profile name (None uses the default chain)

        Returns:
            boto3 Session
        """
        key = (profile, region)
        with self._session_lock:
            return self._get_or_create_session(key)

    def _get_or_create_session(self, key: tuple[Optional[str], str]) -> boto3.Session:
        """Return the cached session for key. Caller must hold _session_lock."""
        if key not in self._sessions:
            profile, region = key
            logger.debug(f"Creating new session for profile {profile or 'default'} in {region}")
            self._sessions[key] = boto3.Session(profile_name=profile, region_name=region)
        return self._sessions[key]

    def get_client(self, service_name: str, region: str, profile: Optional[str] = None) -> Any:
        """Get or create a cached boto3 client.

        boto3 sessions are not thread-safe, so clients are built under the
        same lock that guards the session cache.

        Args:
            service_name: AWS service name, e.g. "apigateway"
            region: AWS region
            profile: Shared credentials profile name

        Returns:
            boto3 client
        """
        key = (service_name, profile, region)
        with self._session_lock:
            if key not in self._clients:
                session = self._get_or_create_session((profile, region))
                self._clients[key] = session.client(service_name)
            return self._clients[key]


# Global singleton instance
_session_manager = SessionManager()


def get_session_manager() -> SessionManager:
    """Get the global session manager instance.

    Returns:
        Global SessionManager instance
    """
    return _session_manager


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
