"""
Idempotent installer for a fixed set of developer tools on Debian/Ubuntu.
"""

__version__ = "0.1.0"
