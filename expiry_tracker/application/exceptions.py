"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class LabelReaderError(ApplicationError):
    """Raised when reading a label through the vision collaborator fails."""


class LabelPayloadError(LabelReaderError):
    """Raised when the collaborator's label payload cannot be decoded."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
