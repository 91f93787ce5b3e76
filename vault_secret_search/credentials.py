import os
from collections import namedtuple

from vault_secret_search.exceptions import ConfigurationError

TOKEN_FILE = "~/.vault-token"

Credentials = namedtuple("Credentials", ["address", "token", "namespace"])


def read_token_file(path=TOKEN_FILE):
    """Token written by ``vault login``, or None if there is no usable file."""
    path = os.path.expanduser(path)
    try:
        with open(path, encoding="utf-8") as f:
            token = f.read().strip()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"could not read Vault token from {path}: {exc}") from exc
    return token or None


def resolve_credentials(environ=None, token_file=TOKEN_FILE):
    if environ is None:
        environ = os.environ

    address = environ.get("VAULT_ADDR", "").strip()
    if not address:
        raise ConfigurationError("Vault address is not provided, set VAULT_ADDR.")

    # Fall back to the file left behind by `vault login`
    token = environ.get("VAULT_TOKEN", "").strip() or read_token_file(token_file)
    if not token:
        raise ConfigurationError(
            f"Vault token is not provided, set VAULT_TOKEN or log in to create {token_file}."
        )

    namespace = environ.get("VAULT_NAMESPACE", "").strip() or None
    return Credentials(address, token, namespace)
