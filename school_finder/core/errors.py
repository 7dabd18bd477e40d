"""Error types raised by the services and translated at the HTTP boundary. - errors"""


class SchoolFinderError(Exception):
    """Base class for application errors. - base"""


class SchoolValidationError(SchoolFinderError):
    """Input failed validation; reported to the caller as a 400. - validation"""


class StoreError(SchoolFinderError):
    """The record store could not complete an operation. - store"""


class ConfigurationError(SchoolFinderError):
    """Required connection settings are absent at startup. - configuration"""
