"""Custom exceptions for Release Captain."""


class ReleaseCaptainError(Exception):
    """Base exception for release notes errors."""


class ConfigurationError(ReleaseCaptainError):
    """Missing or invalid command line argument (e.g. an unknown platform)."""


class MalformedInputError(ReleaseCaptainError):
    """Input CSV file cannot be parsed."""


class MissingHeaderError(MalformedInputError):
    """CSV file does not contain a header line."""
