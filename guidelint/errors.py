"""
errors.py — Exception hierarchy for guidelint.

Library code raises these; only cli.py turns them into an error message
and exit status 2. Per-file problems (unreadable or unparsable sources) are
not exceptions at the run level: the runner reports them as E902 / E999.
"""


class GuidelintError(Exception):
    """Base exception for all guidelint errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigError(GuidelintError):
    """Raised when configuration cannot be read or fails validation."""

    def __init__(self, message: str, source: str | None = None):
        if source:
            message = f'{source}: {message}'
        super().__init__(message, details={'source': source})


class DiscoveryError(GuidelintError):
    """Raised when a path given on the command line does not exist."""

    def __init__(self, path: str):
        super().__init__(f'No such file or directory: {path}', details={'path': path})


class SourceReadError(GuidelintError):
    """Raised when a file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'{path}: {reason}', details={'path': path, 'reason': reason})
