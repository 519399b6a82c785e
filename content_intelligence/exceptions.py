"""
Exceptions raised by the content intelligence engine.

Only the persistence boundary raises; the analysis functions themselves
tolerate malformed or empty input and return empty results instead.
"""


class ContentIntelError(Exception):
    """Base class for all content intelligence errors."""
    pass


class AuthRequiredError(ContentIntelError):
    """Raised when no caller identity is available at the persistence boundary."""
    pass


class AnalysisNotFoundError(ContentIntelError):
    """Raised when a stored website analysis does not exist for the caller."""

    def __init__(self, analysis_id: int):
        self.analysis_id = analysis_id
        super().__init__(f"Website analysis not found: {analysis_id}")


class ConfigurationError(ContentIntelError):
    """Raised when required configuration is missing or invalid."""
    pass
