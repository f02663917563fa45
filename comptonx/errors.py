"""Exceptions raised by ComptonX."""


class ComptonXError(Exception):
    """Base class for all ComptonX errors."""


class InvalidKinematics(ComptonXError, ValueError):
    """Requested kinematics cannot describe a physical Compton event."""


class UnsupportedConfiguration(ComptonXError, NotImplementedError):
    """No implementation exists for the requested frame, particle or state."""
