"""Identify the running Linux distribution from its os-release file."""

from whatadistro.display import render, show
from whatadistro.identity import Identity
from whatadistro.osrelease import OS_RELEASE_PATHS, identify, parse_os_release
from whatadistro.taxonomy import DistroVariant, family_of, resolve
from whatadistro.utils.errors import FileNotFound, FileUnreadable, NoUsableName, ParseError

__version__ = "0.1.0"

__all__ = [
    "DistroVariant",
    "FileNotFound",
    "FileUnreadable",
    "Identity",
    "NoUsableName",
    "OS_RELEASE_PATHS",
    "ParseError",
    "family_of",
    "identify",
    "parse_os_release",
    "render",
    "resolve",
    "show",
]
