"""Session management package."""

from bankist.session.countdown import Countdown, format_countdown
from bankist.session.manager import SessionManager, parse_pin

__all__ = [
    "Countdown",
    "SessionManager",
    "format_countdown",
    "parse_pin",
]
