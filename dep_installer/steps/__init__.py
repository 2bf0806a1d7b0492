from .step_10_resolve_platform import ResolvePlatformStep
from .step_20_clean_target import CleanTargetStep
from .step_30_scan_distributions import ScanDistributionsStep
from .step_40_install_dependencies import InstallDependenciesStep

__all__ = [
    "ResolvePlatformStep",
    "CleanTargetStep",
    "ScanDistributionsStep",
    "InstallDependenciesStep",
]
