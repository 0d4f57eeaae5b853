import os

import pytest

from applypatch.errors import PatchError, PatchErrorKind
from applypatch.utils.fs import LocalFileOps
from applypatch.utils.paths import normalize_rel_path, resolve_under
from applypatch.utils.protect import get_protected_spec, is_protected


def test_normalize_keeps_relative_paths():
    assert normalize_rel_path("a/./b/../c.txt") == "a/c.txt"
    assert normalize_rel_path("dir\\file.txt") == "dir/file.txt"


@pytest.mark.parametrize("bad", ["", "   ", "/abs", "~/home", "C:/win", "..", "../up", "a/../../up"])
def test_normalize_rejects_unsafe_paths(bad):
    with pytest.raises(PatchError) as exc:
        normalize_rel_path(bad)
    assert exc.value.kind is PatchErrorKind.PATH


def test_resolve_under_joins_onto_base(tmp_path):
    base = os.path.realpath(str(tmp_path))
    assert resolve_under(base, "x/y.txt") == os.path.join(base, "x", "y.txt")


def test_protected_spec_always_covers_git():
    spec = get_protected_spec()
    assert is_protected(spec, ".git/HEAD")
    assert not is_protected(spec, "src/app.py")


def test_protected_spec_with_patterns():
    spec = get_protected_spec(["*.lock", "build/", ""])
    assert is_protected(spec, "poetry.lock")
    assert is_protected(spec, "build/out.js")
    assert not is_protected(spec, "src/build.py")


def test_resolve_under_follows_links_before_the_check(tmp_path):
    base = tmp_path / "base"
    base.mkdir()
    (tmp_path / "outside").mkdir()
    os.symlink(tmp_path / "outside", base / "link")
    with pytest.raises(PatchError) as exc:
        resolve_under(os.path.realpath(str(base)), "link/pwned.txt")
    assert exc.value.kind is PatchErrorKind.PATH


def test_real_rel_reports_the_link_target(tmp_path):
    (tmp_path / ".git").mkdir()
    os.symlink(tmp_path / ".git", tmp_path / "g")
    ops = LocalFileOps(str(tmp_path))
    assert ops.real_rel("g/config") == ".git/config"
    assert ops.real_rel("plain/file.txt") == "plain/file.txt"
