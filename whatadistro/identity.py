# whatadistro/identity.py

import logging
from dataclasses import dataclass
from typing import Optional, Union

from whatadistro.taxonomy import DistroVariant, family_of, resolve
from whatadistro.utils.errors import NoUsableName

logger = logging.getLogger(__name__)

NAME_KEY = "NAME"
PRETTY_NAME_KEY = "PRETTY_NAME"
ID_KEY = "ID"
VERSION_ID_KEY = "VERSION_ID"
VERSION_KEY = "VERSION"
ID_LIKE_KEY = "ID_LIKE"


@dataclass(frozen=True)
class Identity:
    """
    One parsed os-release record.
    Build it with identify() (or Identity.current()) rather than by hand.
    """
    name: str
    pretty_name: Optional[str] = None
    id: Optional[str] = None
    version: Optional[str] = None
    id_like: tuple[str, ...] = ()

    @classmethod
    def current(cls) -> "Identity":
        from whatadistro.osrelease import identify
        return identify()

    @classmethod
    def from_fields(cls, fields: dict, source=None) -> "Identity":
        """
        Pick the recognized keys out of a parsed os-release mapping.
        The name comes from NAME, then PRETTY_NAME, then ID; empty values don't count.
        """
        pretty_name = fields.get(PRETTY_NAME_KEY) or None
        id_ = fields.get(ID_KEY) or None
        name = fields.get(NAME_KEY) or pretty_name or id_
        if not name:
            raise NoUsableName(source)

        version = fields.get(VERSION_ID_KEY) or fields.get(VERSION_KEY) or None
        identity = cls(
            name=name,
            pretty_name=pretty_name,
            id=id_,
            version=version,
            id_like=tuple(fields.get(ID_LIKE_KEY, "").split()),
        )
        logger.debug("identified %r (id=%s, version=%s)", identity.name, identity.id, identity.version)
        return identity

    @property
    def variant(self) -> DistroVariant:
        return resolve(self.id if self.id else self.name)

    @property
    def similar_variants(self) -> frozenset:
        # own family plus every known variant named in ID_LIKE
        liked = {resolve(token) for token in self.id_like}
        liked.discard(DistroVariant.UNKNOWN)
        return family_of(self.variant) | liked

    def is_similar(self, other: Union[DistroVariant, str]) -> bool:
        """
        True if `other` (a variant, or an ID / display name) is in this distro's family.
        A string missing from the taxonomy still matches this distro's own ID
        or any ID_LIKE token (case-insensitively); DistroVariant.UNKNOWN never does.
        """
        if isinstance(other, DistroVariant):
            variant = other
        else:
            variant = resolve(other)
            if variant is DistroVariant.UNKNOWN:
                token = other.casefold()
                return any(t.casefold() == token for t in (self.id, *self.id_like) if t)
        if variant is DistroVariant.UNKNOWN:
            return False
        return variant in self.similar_variants
