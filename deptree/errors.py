"""Error types raised by deptree."""


class DeptreeError(Exception):
    """Base class for errors raised while extracting dependency trees."""


class InvalidUserInputError(DeptreeError):
    """Manifest text could not be decoded."""


class UnsupportedManifestError(DeptreeError):
    """Manifest dialect is not recognized."""
