"""Cross-platform dependency installer.

Copies pre-built third-party distributions from
``<platform>/_dist/<dep>-<arch>[-<type>]`` into
``<platform>/<arch>/{debug,release,common}``.

Core design goals:
- Filename-driven classification (no manifests)
- Dry-run safe: every mutation goes through lib.fs
- Centralized logging
"""

__all__ = []
