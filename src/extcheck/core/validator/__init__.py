"""Rule-based validation of Manifest V3 documents.

Given a ``ConfigDocument`` and the directory its relative paths resolve
against, ``ManifestValidator`` runs a fixed, ordered set of independent
checks and returns a ``ValidationReport``:

1. manifest version
2. required fields (name, version, name length, version shape)
3. icons
4. background service worker
5. permissions placement and breadth
6. content scripts
7. web accessible resources
8. content security policy

Submodules
----------
- ``models``: Severity, Finding, ValidationReport.
- ``checks``: The ``Check`` enumeration and one pure function per check.
- ``engine``: The ManifestValidator class.

All public names are re-exported here::

    from extcheck.core.validator import ManifestValidator, Finding, Severity
"""

from extcheck.core.validator.models import Finding, Severity, ValidationReport
from extcheck.core.validator.checks import CHECK_ORDER, Check, run_check
from extcheck.core.validator.engine import ManifestValidator

__all__ = [
    "CHECK_ORDER",
    "Check",
    "Finding",
    "ManifestValidator",
    "Severity",
    "ValidationReport",
    "run_check",
]
