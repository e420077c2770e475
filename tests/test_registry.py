import pytest

from qfkit.core import QfError
from qfkit.registry import ObjectRegistry, trim


def test_trim_strips_blanks():
    assert trim("  abc \t\n") == "abc"
    assert trim("   ") == ""
    assert trim("a b") == "a b"


def test_set_normalises_name_and_starts_at_version_one():
    reg = ObjectRegistry()
    assert reg.set("  curve ", [1, 2]) == ("CURVE", 1)
    assert reg.get("Curve") == [1, 2]
    assert reg.contains("cUrVe")
    assert "curve" in reg


def test_setting_again_bumps_version_and_replaces_object():
    reg = ObjectRegistry()
    reg.set("x", "first")
    assert reg.set("X", "second") == ("X", 2)
    assert reg.get("x") == "second"
    assert reg.version("x") == 2
    assert len(reg) == 1


def test_missing_name():
    reg = ObjectRegistry()
    assert reg.get("nothing") is None
    assert reg.version("nothing") == 0
    assert not reg.contains("nothing")


def test_names_are_sorted():
    reg = ObjectRegistry()
    for name in ("zeta", "alpha", "Mid"):
        reg.set(name, name)
    assert reg.names() == ["ALPHA", "MID", "ZETA"]


def test_clear_resets_versions():
    reg = ObjectRegistry()
    reg.set("a", 1)
    reg.set("a", 2)
    reg.clear()
    assert reg.names() == []
    assert reg.version("a") == 0
    assert reg.set("a", 3) == ("A", 1)


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_empty_names_rejected(name):
    reg = ObjectRegistry()
    with pytest.raises(QfError, match="empty object names not allowed"):
        reg.set(name, 1)


def test_internal_blanks_rejected():
    reg = ObjectRegistry()
    with pytest.raises(QfError, match="blanks not allowed in object names"):
        reg.set("two words", 1)
    with pytest.raises(QfError, match="blanks not allowed in object names"):
        reg.get("a\tb")