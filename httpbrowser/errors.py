"""Project-wide error types."""


class ProjectError(Exception):
    """Base for all httpbrowser errors."""


class ValidationError(ProjectError):
    """Invalid input data."""


class ConfigurationError(ProjectError):
    """Missing or unusable setup."""


class ExternalServiceError(ProjectError):
    """Failure reported by a collaborator such as a request engine."""


__all__ = ["ProjectError", "ValidationError", "ConfigurationError", "ExternalServiceError"]
