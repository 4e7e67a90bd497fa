"""
Accounts component - read-only access to the accounts listing API.
"""

from .component import AccountsClient
from .models import ACCOUNTS_PATH, AccountsQuery

__all__ = [
    "AccountsClient",
    "AccountsQuery",
    "ACCOUNTS_PATH",
]
