"""Exception types raised by the SnapStudio core."""


class StudioError(Exception):
    """Base class for all SnapStudio errors."""


class MissingCredentialsError(StudioError):
    """No API key is configured for the remote model service."""


class MissingImageError(StudioError, ValueError):
    """A source image is required but none was supplied.

    Raised before any network call is made.
    """


class GenerationError(StudioError):
    """The image generation call failed."""


class NoImageGeneratedError(GenerationError):
    """The image model answered, but the response held no inline image."""


class AnalysisError(StudioError):
    """The image analysis call failed or returned a body that is not JSON."""
