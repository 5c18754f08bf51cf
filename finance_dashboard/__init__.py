"""
Finance Dashboard - Source Package

The core of a monthly transactions dashboard: it asks a remote service
for the transactions and balance of a month, turns them into
display-ready records and keeps track of which month is being viewed.

DESIGN PRINCIPLES:
1. The service is the source of truth for totals
2. Presented data is derived, never patched in place
3. Only the most recently requested month may reach the view
4. Failures become observable state, not crashes
"""

__version__ = "1.0.0"
__author__ = "Finance Dashboard Team"
