from __future__ import annotations

from pathlib import Path

import pytest

from dep_installer.errors import SkipDistribution
from dep_installer.lib import distributions as dists


def test_split_name_variants() -> None:
    assert dists.split_name("foo-x86_64-debug") == ("foo", "x86_64", "debug")
    assert dists.split_name("foo-x86_64-release") == ("foo", "x86_64", "release")
    assert dists.split_name("my-lib-x86_64") == ("my-lib", "x86_64", "")
    assert dists.split_name("foo-x86_64-") == ("foo", "x86_64", "")
    assert dists.split_name("Foo-X86_64-Debug") == ("Foo", "x86_64", "debug")


def test_split_name_requires_dash() -> None:
    with pytest.raises(ValueError):
        dists.split_name("zlib")


def test_classify_target_subdirs() -> None:
    accepted = ["x86_64"]
    assert dists.classify(Path("foo-x86_64-debug"), accepted).target_subdir == "debug"
    assert dists.classify(Path("foo-x86_64-release"), accepted).target_subdir == "release"
    assert dists.classify(Path("foo-x86_64"), accepted).target_subdir == "common"


def test_classify_unsupported_arch() -> None:
    with pytest.raises(SkipDistribution) as exc:
        dists.classify(Path("foo-arm64-debug"), ["x86_64"])
    assert exc.value.reason == dists.SKIP_UNSUPPORTED_ARCH
    assert exc.value.name == "foo-arm64-debug"


def test_classify_invalid_type() -> None:
    with pytest.raises(SkipDistribution, match="invalid type") as exc:
        dists.classify(Path("foo-x86_64-profile"), ["x86_64"])
    assert exc.value.reason == dists.SKIP_INVALID_TYPE


def test_classify_unclassifiable() -> None:
    with pytest.raises(SkipDistribution) as exc:
        dists.classify(Path("README"), ["x86_64"])
    assert exc.value.reason == dists.SKIP_UNCLASSIFIABLE


def test_scan_distributions_only_directories(tmp_path: Path) -> None:
    (tmp_path / "zlib-x86_64").mkdir()
    (tmp_path / "boost-x86_64-debug").mkdir()
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / "linked-x86_64").symlink_to(tmp_path / "zlib-x86_64")

    names = [p.name for p in dists.scan_distributions(tmp_path)]

    assert names == ["boost-x86_64-debug", "zlib-x86_64"]
