"""authcore - credential and token service.

Registers users with hashed passwords, authenticates logins and issues,
verifies and refreshes signed identity tokens.
"""

__version__ = "0.1.0"
