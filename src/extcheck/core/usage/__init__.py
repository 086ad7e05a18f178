"""Static permission usage analysis for extension source trees.

``UsageAnalyzer`` scans a project with ``SourceScanner``, detects
``chrome.*`` capability references lexically, maps them to permissions,
and reports which declared permissions are unused and which used ones
are missing from the manifest.

Submodules
----------
- ``scanner``: SourceScanner (depth-first file discovery).
- ``patterns``: Detection regex, CAPABILITY_PERMISSIONS table.
- ``models``: CapabilityUsageRecord, AnalysisResult.
- ``engine``: The UsageAnalyzer class.

All public names are re-exported here::

    from extcheck.core.usage import UsageAnalyzer, AnalysisResult
"""

from extcheck.core.usage.models import AnalysisResult, CapabilityUsageRecord
from extcheck.core.usage.patterns import (
    CAPABILITY_PERMISSIONS,
    NON_CRITICAL_PERMISSIONS,
    detect_capabilities,
    permission_for,
)
from extcheck.core.usage.scanner import DEFAULT_EXTENSIONS, EXCLUDED_DIRS, SourceScanner
from extcheck.core.usage.engine import UsageAnalyzer

__all__ = [
    "AnalysisResult",
    "CAPABILITY_PERMISSIONS",
    "CapabilityUsageRecord",
    "DEFAULT_EXTENSIONS",
    "EXCLUDED_DIRS",
    "NON_CRITICAL_PERMISSIONS",
    "SourceScanner",
    "UsageAnalyzer",
    "detect_capabilities",
    "permission_for",
]
