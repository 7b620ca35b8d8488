"""
utils/ - Shared Helpers
=======================
Logging, input validation, console I/O and small geometry helpers.
"""
