"""
CLI Configuration

Exit statuses and environment variable names for the suggestions command line.
"""

from dataclasses import dataclass

# Exit statuses
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_IO_ERROR = 1
# Chosen to be distinct from the usage/I/O status
EXIT_NO_SUGGESTIONS = 7

# Environment variables that default the matching flags
ENV_SINGLE = "SUGGESTIONS_SINGLE"
ENV_QUOTE = "SUGGESTIONS_QUOTE"
ENV_JSON = "SUGGESTIONS_JSON"
ENV_REQUIRED = "SUGGESTIONS_REQUIRED"

# Candidate file argument meaning "read from stdin"
STDIN_MARKER = "-"


@dataclass(frozen=True)
class CLIConfig:
    """Presentation options for one invocation of the CLI"""

    single: bool = False
    quote: bool = False
    json_output: bool = False
    required: bool = False

    @property
    def quote_values(self) -> bool:
        """JSON output always quotes, --quote only matters for plain text."""
        return self.quote or self.json_output
