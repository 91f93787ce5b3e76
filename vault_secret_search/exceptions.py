class VaultSecretSearchError(Exception):
    pass


class ConfigurationError(VaultSecretSearchError):
    """Vault address, token or client could not be set up."""


class TraversalError(VaultSecretSearchError):
    """A LIST request failed somewhere in the tree.

    ``path`` is the logical path that was being listed and ``error`` the
    exception raised by the client, also available as ``__cause__``.
    """

    def __init__(self, path, error):
        super().__init__(f"{path}: {error}")
        self.path = path
        self.error = error
