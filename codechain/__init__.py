import os
from importlib.metadata import PackageNotFoundError, version


def _read_version() -> str:
    """Version of the installed distribution. A source tree reads VERSION which setup.py also reads."""
    try:
        return version("codechain-tx")
    except PackageNotFoundError:
        with open(os.path.join(os.path.dirname(__file__), '..', 'VERSION')) as version_file:
            return version_file.read().strip()


__version__ = _read_version()
