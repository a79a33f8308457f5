import os

version = None

if version is None:
    # When installed with pip - Fetch version from the installed metadata
    try:
        from importlib.metadata import version as get_version

        version = get_version(__name__.split(".", 1)[0])
    except Exception:  # noqa: S110
        pass

if version is None:
    # When version.txt file is available - use that
    try:
        with open(os.path.join(os.path.dirname(__file__), "version.txt")) as fh:
            version = fh.read().strip()
    except Exception:  # noqa: S110
        pass
