HEADER = "Found the following secrets:"


def filter_paths(paths, search=""):
    """Keep the paths containing ``search``, ignoring case. Order is preserved."""
    if not search:
        return list(paths)
    needle = search.lower()
    return [path for path in paths if needle in path.lower()]


def render(mount, paths):
    yield HEADER
    for path in paths:
        yield f"{mount}/{path}"
