from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import InstallConfig, load_config_file
from .errors import InstallError
from .lib.platforms import host_arch, host_platform
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .steps import (
    CleanTargetStep,
    InstallDependenciesStep,
    ResolvePlatformStep,
    ScanDistributionsStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        ResolvePlatformStep(),
        CleanTargetStep(),
        ScanDistributionsStep(),
        InstallDependenciesStep(),
    ]


def run(cfg: InstallConfig) -> Dict[str, Any]:
    """Run the install pipeline; --clean stops after the target is removed."""

    state: Dict[str, Any] = {"config": cfg, "execution": {}}
    stop_after = CleanTargetStep.step_id if cfg.clean_only else None

    try:
        result = run_pipeline(state=state, steps=build_steps(), stop_after=stop_after)
    except InstallError:
        raise
    except Exception:
        logger.exception("Install failed in step %s", state["execution"].get("current_step"))
        raise

    result.state["execution"]["ran_steps"] = result.ran_steps
    return result.state


class InstallArgumentParser(argparse.ArgumentParser):
    """Usage errors are fatal configuration errors (exit 1), not argparse's exit 2."""

    def error(self, message: str):
        raise InstallError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    # --help exits 1, so argparse's own help action is disabled.
    p = InstallArgumentParser(
        prog="dep-installer",
        description="Install pre-built dependencies from <platform>/_dist into <platform>/<arch>.",
        add_help=False,
        allow_abbrev=False,
    )
    # A bare -p/-a yields "" and fails platform/arch validation.
    p.add_argument("-p", "--platform", nargs="?", const="", default=None, help="Platform to install for (default: this host)")
    p.add_argument("-a", "--arch", nargs="?", const="", default=None, help="Processor architecture to install for (default: this host)")
    p.add_argument("-c", "--clean", action="store_true", help="Remove installed dependencies and exit")
    p.add_argument("-n", "--dryrun", action="store_true", help="Only report what would be done")
    p.add_argument("-d", "--debug", action="store_true", help="Log debug messages")
    p.add_argument("-v", "--verify", action="store_true", help="Ask before overwriting installed files")
    p.add_argument("-r", "--root", default=None, help="Directory containing the platform directories (default: .)")
    p.add_argument("--config", default=None, help="YAML file with defaults for platform, arch, root and log")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    return p


def config_from_args(args: argparse.Namespace) -> InstallConfig:
    """Merge command line, --config file and host defaults, in that order."""

    defaults: Dict[str, Any] = load_config_file(args.config) if args.config else {}

    def pick(key: str, fallback: Optional[str]) -> Optional[str]:
        value = getattr(args, key)
        if value is not None:
            return value
        if key in defaults:
            return defaults[key]
        return fallback

    return InstallConfig(
        platform=pick("platform", host_platform()) or "",
        arch=pick("arch", host_arch()) or "",
        root=Path(pick("root", ".") or "."),
        clean_only=bool(args.clean),
        dry_run=bool(args.dryrun),
        debug=bool(args.debug),
        verify=bool(args.verify),
        log_path=pick("log", None),
    )


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    try:
        args, unknown = p.parse_known_args(argv)
    except InstallError as e:
        configure_logging()
        logger.error("%s", e)
        return 1

    if args.help:
        p.print_help()
        return 1

    level = logging.DEBUG if args.debug else logging.INFO
    try:
        cfg = config_from_args(args)
    except InstallError as e:
        configure_logging(log_path=args.log, level=level)
        logger.error("%s", e)
        return 1

    configure_logging(log_path=cfg.log_path, level=level)
    for arg in unknown:
        logger.warning("Ignoring unknown argument: %s", arg)

    try:
        run(cfg)
    except InstallError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
