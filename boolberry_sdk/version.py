"""
Version information for the Boolberry SDK.
"""
import importlib.metadata
import pathlib

import tomli

DEFAULT_VERSION = "0.2.0"

try:
    __version__ = importlib.metadata.version("boolberry-sdk")
except importlib.metadata.PackageNotFoundError:
    # Source checkout: read pyproject.toml next to the package
    try:
        path = pathlib.Path(__file__).parent.parent / "pyproject.toml"
        with path.open("rb") as f:
            data = tomli.load(f)
        __version__ = data["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        __version__ = DEFAULT_VERSION
