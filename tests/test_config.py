from __future__ import annotations

from pathlib import Path

import pytest

from dep_installer.config import load_config_file
from dep_installer.errors import InstallError
from dep_installer.main import build_parser, config_from_args


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "deps.yaml"
    path.write_text("platform: Darwin\narch: arm64\nroot: third_party\n", encoding="utf-8")

    assert load_config_file(str(path)) == {"platform": "Darwin", "arch": "arm64", "root": "third_party"}


def test_load_config_file_errors(tmp_path: Path) -> None:
    with pytest.raises(InstallError, match="not found"):
        load_config_file(str(tmp_path / "missing.yaml"))

    listing = tmp_path / "list.yaml"
    listing.write_text("- linux\n", encoding="utf-8")
    with pytest.raises(InstallError, match="mapping"):
        load_config_file(str(listing))

    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("platform: linux\njobs: 4\n", encoding="utf-8")
    with pytest.raises(InstallError, match="Unknown keys"):
        load_config_file(str(unknown))


def test_config_precedence(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("dep_installer.main.host_platform", lambda: "Linux")
    monkeypatch.setattr("dep_installer.main.host_arch", lambda: "aarch64")
    path = tmp_path / "deps.yaml"
    path.write_text("platform: darwin\nroot: vendor\n", encoding="utf-8")

    args, _ = build_parser().parse_known_args(["--config", str(path), "-p", "windows", "-n"])
    cfg = config_from_args(args)

    assert cfg.platform == "windows"
    assert cfg.arch == "aarch64"
    assert cfg.root == Path("vendor")
    assert cfg.dry_run is True
    assert cfg.clean_only is False


def test_config_host_defaults(monkeypatch) -> None:
    monkeypatch.setattr("dep_installer.main.host_platform", lambda: "Linux")
    monkeypatch.setattr("dep_installer.main.host_arch", lambda: "x86_64")

    args, _ = build_parser().parse_known_args([])
    cfg = config_from_args(args)

    assert (cfg.platform, cfg.arch, cfg.root) == ("Linux", "x86_64", Path("."))
