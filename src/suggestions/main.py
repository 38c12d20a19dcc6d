import importlib
import sys
import typer
from pathlib import Path
from typing import List, Optional, Sequence

from suggestions.logging_config import logger, setup_logging
from suggestions.exceptions import CandidateSourceError, SuggestionsRequiredError
from suggestions.ranking import best_suggestion, rank_suggestions, score_candidates
from suggestions.schemas import SuggestionReport, SuggestionResult
from suggestions.cli.config import (
    CLIConfig,
    ENV_JSON,
    ENV_QUOTE,
    ENV_REQUIRED,
    ENV_SINGLE,
    EXIT_IO_ERROR,
    EXIT_NO_SUGGESTIONS,
    EXIT_OK,
    EXIT_USAGE,
)
from suggestions.cli.output import print_error, print_report
from suggestions.cli.sources import load_candidates
from suggestions.cli.suggestions import flag_suggestions

PROG_NAME = "suggestions"

# Exception types of the click that typer actually uses (standalone or bundled)
click_exceptions = importlib.import_module(typer.BadParameter.__module__)

app = typer.Typer(
    add_completion=False,
    # Options end at the first target, so targets may look like flags
    context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": False},
)


def _describe_scores(target: str, possible_values: Sequence[str]) -> str:
    scored = score_candidates(target, possible_values)
    return ", ".join(f"{s.value!r}={s.score:.4f}" for s in scored)


def build_report(targets: Sequence[str], possible_values: Sequence[str], single: bool = False) -> SuggestionReport:
    """
    Rank the possible values for every target.

    Args:
        targets: Tokens to find suggestions for, in command-line order
        possible_values: Candidates shared by every target
        single: Keep only the best suggestion for each target

    Returns:
        A SuggestionReport with one result per target
    """
    results = []
    for target in targets:
        logger.opt(lazy=True).debug(
            "Scores for {}: {}", lambda: repr(target), lambda: _describe_scores(target, possible_values)
        )
        if single:
            best = best_suggestion(target, possible_values)
            found = [best] if best is not None else []
        else:
            found = rank_suggestions(target, possible_values)
        results.append(SuggestionResult(target=target, suggestions=found))
    return SuggestionReport(results=results)


def require_suggestions(report: SuggestionReport) -> None:
    """
    Raises:
        SuggestionsRequiredError: If any target of the report has no suggestion
    """
    missing = report.missing()
    if missing:
        raise SuggestionsRequiredError(missing)


@app.command()
def suggest(
    targets: List[str] = typer.Argument(
        ...,
        metavar="TARGET...",
        help="Tokens to find suggestions for. Everything from the first target on is a target; use '--' if the first one starts with '-'.",
        show_default=False,
    ),
    single: bool = typer.Option(
        False, "--single", "-s", envvar=ENV_SINGLE, help="Return only a single suggestion for each target."
    ),
    quote: bool = typer.Option(
        False, "--quote", "-q", envvar=ENV_QUOTE, help="Quote each output suggestion."
    ),
    json_output: bool = typer.Option(
        False, "--json", envvar=ENV_JSON, help="Output information as valid JSON."
    ),
    required: bool = typer.Option(
        False,
        "--required",
        envvar=ENV_REQUIRED,
        help="Exit with an error if any of the targets have no suggestions.",
    ),
    candidates_file: Optional[Path] = typer.Option(
        None,
        "--candidates",
        "-c",
        help="Read possible values from this file instead of standard input ('-' for stdin).",
        dir_okay=False,
        allow_dash=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log candidate scores to stderr."
    ),
):
    """
    Suggest which possible values each TARGET was meant to be.

    Accepts possible values from standard input, one per line.
    Suggestions are printed weakest first, one line per target.
    """
    if verbose:
        setup_logging(level="DEBUG", suppress_console=False, force=True)

    config = CLIConfig(single=single, quote=quote, json_output=json_output, required=required)

    try:
        possible_values = load_candidates(candidates_file)
        report = build_report(targets, possible_values, single=config.single)
        if config.required:
            require_suggestions(report)
    except CandidateSourceError as e:
        logger.debug(f"Candidate source failed: {e}")
        print_error(str(e))
        raise typer.Exit(code=EXIT_IO_ERROR)
    except SuggestionsRequiredError as e:
        logger.debug(f"Suggestions required but missing for {e.targets}")
        print_error(str(e))
        raise typer.Exit(code=EXIT_NO_SUGGESTIONS)

    print_report(report, config)


def main(args: Optional[List[str]] = None) -> int:
    """
    Run the CLI and return its exit status instead of exiting.

    Click reports usage errors with status 2; they are mapped to EXIT_USAGE
    here, and unknown options get a hint from the ranker.
    """
    command = typer.main.get_command(app)
    try:
        status = command.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except click_exceptions.NoSuchOption as e:
        print_error(e.message, suggest=flag_suggestions(e.option_name, command))
        typer.echo(f"See '{PROG_NAME} --help' for possible options.", err=True)
        return EXIT_USAGE
    except click_exceptions.ClickException as e:
        e.show()
        return EXIT_USAGE
    except click_exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return EXIT_USAGE
    return status or EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
