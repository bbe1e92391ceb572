import dataclasses

import pytest

from whatadistro import osrelease
from whatadistro.identity import Identity
from whatadistro.taxonomy import DistroVariant
from whatadistro.utils.errors import NoUsableName

KNOWN = [v for v in DistroVariant if v is not DistroVariant.UNKNOWN]


def test_from_fields_fallback_chain():
    assert Identity.from_fields({"NAME": "A", "PRETTY_NAME": "B", "ID": "c"}).name == "A"
    assert Identity.from_fields({"PRETTY_NAME": "B", "ID": "c"}).name == "B"
    assert Identity.from_fields({"ID": "c"}).name == "c"


def test_from_fields_without_name():
    with pytest.raises(NoUsableName):
        Identity.from_fields({"NAME": "", "ID": "", "VERSION_ID": "1"})


def test_id_like_is_split():
    distro = Identity.from_fields({"NAME": "Pop!_OS", "ID": "pop", "ID_LIKE": "ubuntu debian"})
    assert distro.id_like == ("ubuntu", "debian")


def test_identity_is_frozen():
    distro = Identity(name="Arch Linux", id="arch")
    with pytest.raises(dataclasses.FrozenInstanceError):
        distro.name = "other"


def test_current_reads_default_paths(monkeypatch, os_release_factory):
    monkeypatch.setattr(osrelease, "OS_RELEASE_PATHS", (os_release_factory("ID=arch\nNAME=Arch Linux\n"),))
    assert Identity.current() == Identity(name="Arch Linux", id="arch")


class TestVariant:
    def test_resolved_from_id(self):
        assert Identity(name="Whatever", id="ubuntu").variant is DistroVariant.UBUNTU

    def test_falls_back_to_name(self):
        assert Identity(name="Linux Mint").variant is DistroVariant.MINT

    def test_unknown_id_does_not_fall_back_to_name(self):
        assert Identity(name="Ubuntu", id="custom").variant is DistroVariant.UNKNOWN


class TestIsSimilar:
    def test_ubuntu(self):
        distro = Identity(name="Ubuntu", id="ubuntu", version="22.04")
        assert distro.is_similar("debian")
        assert distro.is_similar("Linux Mint")
        assert distro.is_similar(DistroVariant.DEBIAN)
        assert not distro.is_similar("fedora")
        assert not distro.is_similar(DistroVariant.ARCH)

    def test_case_insensitive_other(self):
        distro = Identity(name="Arch Linux", id="arch")
        assert distro.is_similar("Arch")
        assert distro.is_similar("ARCH")

    @pytest.mark.parametrize("variant", KNOWN)
    def test_reflexive(self, variant):
        distro = Identity(name="x", id=variant.value)
        assert distro.is_similar(variant)
        assert distro.is_similar(distro.variant)

    @pytest.mark.parametrize("a", KNOWN)
    @pytest.mark.parametrize("b", KNOWN)
    def test_symmetric_for_authored_table(self, a, b):
        left = Identity(name="x", id=a.value)
        right = Identity(name="y", id=b.value)
        assert left.is_similar(b) == right.is_similar(a)

    def test_unlisted_distro_matches_its_own_id(self):
        distro = Identity(name="Manjaro Linux", id="manjaro")
        assert distro.is_similar("manjaro")
        assert distro.is_similar("MANJARO")
        assert not distro.is_similar("slackware")
        assert not distro.is_similar("arch")

    def test_unknown_variant_is_similar_to_nothing(self):
        assert not Identity(name="Slackware", id="slackware").is_similar(DistroVariant.UNKNOWN)
        assert not Identity(name="Slackware").is_similar(DistroVariant.UNKNOWN)

    def test_unlisted_id_like_token_matches(self):
        distro = Identity(name="Foo", id="foo", id_like=("bar", "baz"))
        assert distro.is_similar("bar")
        assert distro.is_similar("Baz")
        assert not distro.is_similar("qux")

    def test_unlisted_string_without_id(self):
        assert not Identity(name="Some Distro").is_similar("some distro")

    def test_unresolvable_other_is_false(self):
        assert not Identity(name="Arch Linux", id="arch").is_similar("manjaro")

    def test_id_like_extends_family(self):
        distro = Identity(name="Manjaro Linux", id="manjaro", id_like=("arch",))
        assert distro.variant is DistroVariant.UNKNOWN
        assert distro.is_similar("arch")
        assert not distro.is_similar("debian")

    def test_id_like_unknown_tokens_ignored(self):
        distro = Identity(name="Foo", id="foo", id_like=("bar", "baz"))
        assert distro.similar_variants == frozenset()

    def test_similar_variants(self):
        distro = Identity(name="Pop!_OS", id="pop", id_like=("ubuntu", "debian"))
        assert distro.similar_variants == {DistroVariant.UBUNTU, DistroVariant.DEBIAN}
