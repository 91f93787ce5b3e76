import argparse
import logging
import sys

from vault_secret_search.client import VaultLister, make_client
from vault_secret_search.credentials import resolve_credentials
from vault_secret_search.exceptions import ConfigurationError, TraversalError
from vault_secret_search.render import filter_paths, render
from vault_secret_search.walker import walk

logger = logging.getLogger(__name__)


def _mount_point(value):
    """argparse type for a mount point, without surrounding slashes."""
    mount = value.strip("/")
    if not mount:
        raise argparse.ArgumentTypeError(f"invalid mount point: {value!r}")
    return mount


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="vault-secret-search",
        description="Recursively list the secret paths under a Vault KV v2 mount.",
    )
    parser.add_argument("search", nargs="?", default="",
                        help="Only show paths containing this text (case-insensitive).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument("-m", "--mount", default="secret", type=_mount_point,
                        help="Mountpoint to search for secrets (default: %(default)s)")
    return parser.parse_args(argv)


def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def search_secrets(client, mount, search):
    secrets = walk(client, mount, logger=logger)
    for line in render(mount, filter_paths(secrets, search)):
        print(line)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        client = make_client(resolve_credentials())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        search_secrets(VaultLister(client), args.mount, args.search)
    except TraversalError as e:
        print(f"Error listing secrets: {e}", file=sys.stderr)
        sys.exit(1)
