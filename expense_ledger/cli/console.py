from rich.console import Console
from rich.prompt import Confirm

# memos are printed verbatim: no markup, emoji codes or highlighting
console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True)


def echo(line: str) -> None:
    console.print(line)


def echo_error(line: str) -> None:
    err_console.print(line)


def confirm(question: str) -> bool:
    return Confirm.ask(question, default=False, console=console)
