"""
Bankist - Source Package

In-memory personal banking demo: a logged-in user sees their movements,
balance and summary, and can transfer money, request loans and close
their account.

DESIGN PRINCIPLES:
1. Derived figures are computed, never stored
2. Rejections are results, not exceptions
3. One session, one countdown
4. Every state transition is auditable
5. Clock, scheduler and formatting are injectable
"""

__version__ = "1.0.0"
__author__ = "Bankist Team"
