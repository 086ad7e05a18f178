"""ExtCheck exception hierarchy.

All public exceptions inherit from ExtCheckError, giving callers a single
base class to catch when they want to handle any ExtCheck-specific failure
without swallowing unrelated errors.

Validation findings and permission gaps are never raised. They are data,
returned by the engines and rendered by the CLI.
"""


class ExtCheckError(Exception):
    """Base exception for all ExtCheck errors."""


class ManifestLoadError(ExtCheckError):
    """Raised when a manifest document cannot be loaded.

    Covers unreadable files, malformed JSON, a top-level value that is
    not an object, and fields whose JSON type does not match the
    expected manifest shape. No partial validation is attempted once
    this is raised.
    """


class ScanError(ExtCheckError):
    """Raised when the source tree cannot be traversed.

    Covers unreadable directories and eligible source files that cannot
    be opened during a usage scan.
    """


class RegistrySyncError(ExtCheckError):
    """Raised when a plugin registry cannot be synchronized.

    Covers unreadable or malformed plugin.json files, malformed sync
    configuration, and write failures.
    """
