from urllib.parse import urlsplit

import hvac
import hvac.exceptions
import requests

from vault_secret_search.exceptions import ConfigurationError

# Errors a LIST request may raise that abort a walk.
LISTING_ERRORS = (hvac.exceptions.VaultError, requests.exceptions.RequestException)


class VaultLister:
    """Lists the children of a KV v2 path through an ``hvac.Client``."""

    def __init__(self, client):
        self.client = client

    def list(self, mount, path):
        # LIST /v1/<mount>/metadata/<path>
        try:
            response = self.client.secrets.kv.v2.list_secrets(path=path, mount_point=mount)
        except hvac.exceptions.InvalidPath:
            return None
        return response['data']['keys']


def make_client(credentials):
    # hvac accepts any string as url and only fails on the first request
    address = urlsplit(credentials.address)
    if address.scheme not in ("http", "https") or not address.netloc:
        raise ConfigurationError(
            f"could not create Vault client: invalid address {credentials.address!r}, "
            "expected http(s)://host[:port]"
        )
    return hvac.Client(
        url=credentials.address,
        token=credentials.token,
        namespace=credentials.namespace,
    )
