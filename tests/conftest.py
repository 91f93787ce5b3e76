import pytest


class FakeLister:
    """In-memory stand-in for VaultLister.

    ``listings`` maps a directory path (relative to the mount) to the keys a
    LIST on it returns; unknown paths behave like a 404. ``errors`` maps a
    path to the exception its LIST raises.
    """

    def __init__(self):
        self.listings = {}
        self.errors = {}
        self.calls = []

    def load(self, tree, path=""):
        """Fill ``listings`` from a nested dict, None marks a secret."""
        self.listings[path] = list(tree)
        for name, children in tree.items():
            if children is not None:
                self.load(children, path + name)

    def list(self, mount, path):
        self.calls.append((mount, path))
        if path in self.errors:
            raise self.errors[path]
        return self.listings.get(path)


@pytest.fixture
def vault():
    return FakeLister()


@pytest.fixture
def example_tree():
    return {"a": None, "b/": {"c": None, "d/": {"e": None}}}
