"""
Suggestion generation for CLI usage errors.

Feeds the command's own option names through the ranker so a mistyped flag
gets a "did you mean" hint.
"""

from typing import List

from suggestions.ranking import rank_suggestions


def option_names(command) -> List[str]:
    """
    All long and short option spellings the command accepts, in declaration order.

    Args:
        command: The click command built by typer.main.get_command()
    """
    ctx = command.context_class(command)
    names: List[str] = []
    for param in command.get_params(ctx):
        # "option" vs "argument"; holds for click and for the copy typer bundles
        if param.param_type_name == "option":
            names.extend(param.opts)
            names.extend(param.secondary_opts)
    return names


def flag_suggestions(input_value: str, command, max_suggestions: int = 3) -> List[str]:
    """
    Suggest known options for a mistyped one.

    Args:
        input_value: The option the user typed
        command: Command whose options are the candidates
        max_suggestions: Maximum number of suggestions to return

    Returns:
        Up to `max_suggestions` option names, best last
    """
    if max_suggestions <= 0:
        return []
    ranked = rank_suggestions(input_value, option_names(command))
    return ranked[-max_suggestions:]
