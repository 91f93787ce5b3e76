"""Recursive enumeration of the secret paths below a KV v2 mount.

Vault marks sub-directories with a trailing slash in LIST responses, so a
child is classified once, by name, and only directories cost another
round-trip.
"""

import logging

from vault_secret_search.client import LISTING_ERRORS
from vault_secret_search.exceptions import TraversalError

SEPARATOR = "/"


def is_directory(path):
    return path.endswith(SEPARATOR)


def walk(client, mount, path="", logger=None, sort=True):
    """Return every leaf path below ``path``, relative to ``mount``.

    ``client`` is anything with a ``list(mount, path)`` method returning the
    child names, or None when the path does not exist. A failed request at
    any depth aborts the whole walk with a :class:`TraversalError`.
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    found = []

    log.debug("Listing secrets path=%s%s%s", mount, SEPARATOR, path)
    try:
        keys = client.list(mount, path)
    except LISTING_ERRORS as exc:
        raise TraversalError(f"{mount}/metadata/{path}", exc) from exc

    if keys is None:
        log.debug("No secrets found path=%s%s%s", mount, SEPARATOR, path)
        return found

    if sort:
        keys = sorted(keys)

    for item in keys:
        item_path = path + item
        if is_directory(item_path):
            log.debug("Found a directory item=%s", item)
            found.extend(walk(client, mount, item_path, logger=log, sort=sort))
        else:
            log.debug("Found a secret item=%s", item)
            found.append(item_path)

    log.debug("Found secrets number=%d path=%s%s%s", len(found), mount, SEPARATOR, path)
    return found
