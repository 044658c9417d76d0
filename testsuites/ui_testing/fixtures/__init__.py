"""
Session bootstrap used by the `session` / `home_page` pytest fixtures.
"""

from .session import Session, establish_session

__all__ = ["Session", "establish_session"]
