from pydantic import BaseModel, Field
from typing import Dict, List


class SuggestionResult(BaseModel):
    """
    Suggestions produced for one target, weakest first.
    """
    target: str
    suggestions: List[str] = Field(default_factory=list)


class SuggestionReport(BaseModel):
    """
    Results for every target of a single invocation, in command-line order.
    """
    results: List[SuggestionResult] = Field(default_factory=list)

    def missing(self) -> List[str]:
        """Targets that produced no suggestion."""
        return [result.target for result in self.results if not result.suggestions]

    def as_mapping(self) -> Dict[str, List[str]]:
        """Target -> suggestions. A repeated target keeps its last result."""
        return {result.target: result.suggestions for result in self.results}
