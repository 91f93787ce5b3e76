"""Recursively list the secret paths stored under a Vault KV v2 mount."""

from vault_secret_search.exceptions import (
    ConfigurationError,
    TraversalError,
    VaultSecretSearchError,
)
from vault_secret_search.walker import walk

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "TraversalError",
    "VaultSecretSearchError",
    "walk",
]
