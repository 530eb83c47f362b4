"""Domain-specific exceptions used by the generation service."""


class GenerationError(Exception):
    """Raised when a generation run fails; the partial file is left on disk."""


class GenerationCancelledError(Exception):
    """Raised when a user-initiated cancellation stops file generation."""
