# whatadistro/taxonomy.py

import enum
import logging
from types import MappingProxyType
from typing import NamedTuple

logger = logging.getLogger(__name__)


class DistroVariant(enum.Enum):
    """
    Known distributions. Values are the canonical os-release ID.
    DistroVariant(token) accepts any string and resolves it like resolve().
    """
    ARCH = "arch"
    DEBIAN = "debian"
    UBUNTU = "ubuntu"
    MINT = "linuxmint"
    RHEL = "rhel"
    FEDORA = "fedora"
    OPENSUSE = "opensuse"
    GENTOO = "gentoo"
    NIXOS = "nixos"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return resolve(value)
        return None

    @property
    def display_name(self) -> str:
        info = TAXONOMY.get(self)
        return info.names[0] if info else "Unknown"

    def __str__(self):
        return self.value


class DistroInfo(NamedTuple):
    ids: tuple[str, ...]
    names: tuple[str, ...]
    family: frozenset


V = DistroVariant

TAXONOMY = MappingProxyType({
    V.ARCH: DistroInfo(
        ("arch",),
        ("Arch Linux",),
        frozenset({V.ARCH}),
    ),
    V.DEBIAN: DistroInfo(
        ("debian",),
        ("Debian GNU/Linux", "Debian"),
        frozenset({V.DEBIAN, V.UBUNTU, V.MINT}),
    ),
    V.UBUNTU: DistroInfo(
        ("ubuntu",),
        ("Ubuntu",),
        frozenset({V.UBUNTU, V.DEBIAN, V.MINT}),
    ),
    V.MINT: DistroInfo(
        ("linuxmint", "mint"),
        ("Linux Mint",),
        frozenset({V.MINT, V.DEBIAN, V.UBUNTU}),
    ),
    V.RHEL: DistroInfo(
        ("rhel",),
        ("Red Hat Enterprise Linux",),
        frozenset({V.RHEL, V.FEDORA, V.OPENSUSE}),
    ),
    V.FEDORA: DistroInfo(
        ("fedora",),
        ("Fedora Linux", "Fedora"),
        frozenset({V.FEDORA, V.RHEL, V.OPENSUSE}),
    ),
    V.OPENSUSE: DistroInfo(
        ("opensuse", "suse", "opensuse-tumbleweed", "opensuse_tumbleweed", "opensuse-leap"),
        ("openSUSE", "openSUSE Tumbleweed", "openSUSE Leap"),
        frozenset({V.OPENSUSE, V.FEDORA, V.RHEL}),
    ),
    V.GENTOO: DistroInfo(
        ("gentoo",),
        ("Gentoo",),
        frozenset({V.GENTOO}),
    ),
    V.NIXOS: DistroInfo(
        ("nixos",),
        ("NixOS",),
        frozenset({V.NIXOS}),
    ),
})

# casefolded id or display name -> variant
_TOKENS = MappingProxyType({
    token.casefold(): variant
    for variant, info in TAXONOMY.items()
    for token in info.ids + info.names
})


def resolve(token: str) -> DistroVariant:
    """
    Case-insensitive exact lookup of an os-release ID or display name.
    Anything not in the table is DistroVariant.UNKNOWN.
    """
    variant = _TOKENS.get(token.casefold(), DistroVariant.UNKNOWN)
    if variant is DistroVariant.UNKNOWN:
        logger.debug("unknown distro token %r", token)
    return variant


def family_of(variant: DistroVariant) -> frozenset:
    """Variants considered similar to `variant`, itself included. Empty for UNKNOWN."""
    info = TAXONOMY.get(variant)
    return info.family if info else frozenset()
