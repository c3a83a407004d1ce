"""
Interactive container selection
"""
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from docker_ip_retrieval.application.services.container_catalog import ALL_CHOICE
from docker_ip_retrieval.shared.errors import PromptFailureError

PROMPT_MESSAGE = "Select a Docker container to retrieve its status"


def prompt_container(
    choices: Sequence[str],
    console: Optional[Console] = None,
    require_tty: bool = True,
) -> str:
    """
    Ask the user for "All" or one container name

    Raises:
        PromptFailureError: stdin is not interactive, or input was closed or
            interrupted before an answer was given
    """
    if require_tty and not sys.stdin.isatty():
        raise PromptFailureError("Cannot prompt for a container: stdin is not a terminal")

    console = console or Console()
    for name in choices:
        console.print(f"  - {name}", markup=False, highlight=False)

    try:
        answer = Prompt.ask(
            PROMPT_MESSAGE,
            choices=list(choices),
            default=ALL_CHOICE,
            show_choices=False,
            console=console,
        )
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptFailureError("Container selection was cancelled") from e
    return answer
