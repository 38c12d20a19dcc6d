# Custom exceptions for suggestions

from typing import List


class SuggestionsError(Exception):
    """Base exception for all application-specific errors."""
    pass


class CandidateSourceError(SuggestionsError):
    """Raised when the list of possible values cannot be read."""
    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Failed to read candidates from {source}: {message}")


class SuggestionsRequiredError(SuggestionsError):
    """Raised when suggestions were required but some targets produced none."""

    def __init__(self, targets: List[str]):
        self.targets = targets
        listed = ", ".join(repr(target) for target in targets)
        super().__init__(f"No relevant suggestions for {listed}")
