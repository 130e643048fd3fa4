import asyncio
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, TypeVar

from expense_ledger.core.logger import logger
from expense_ledger.entities import OperationResult
from expense_ledger.services import ExpenseService
from expense_ledger.utils import formatter
from . import console

T = TypeVar("T")

HELP_TEXT = """An expense recording system

Commands:

add AMOUNT MEMO [DATE] - record a new expense
clear - delete all expenses
list - list all expenses
delete NUMBER - remove expense with id NUMBER
search QUERY - list expenses with a matching memo field"""

MISSING_ADD_ARGS = "You must provide an amount and memo."
MISSING_SEARCH_TERM = "You must provide a search term."
MISSING_EXPENSE_ID = "You must provide an expense ID."
CLEAR_PROMPT = "This will remove all expenses. Are you sure?"

EXIT_OK = 0
EXIT_FAILURE = 1


class CommandDispatcher:
    """
    Maps the first command line token to one ExpenseService operation.

    Argument checks happen before the service is touched. Missing arguments
    and unknown commands are not failures (exit 0); only a failed
    OperationResult yields exit 1.
    """

    def __init__(
        self,
        service: ExpenseService,
        *,
        echo: Callable[[str], None] = console.echo,
        echo_error: Callable[[str], None] = console.echo_error,
        confirm: Callable[[str], bool] = console.confirm,
    ) -> None:
        self.service = service
        self.echo = echo
        self.echo_error = echo_error
        self.confirm = confirm
        self._commands: Dict[str, Callable[[List[str]], Awaitable[int]]] = {
            "list": self._list,
            "add": self._add,
            "search": self._search,
            "delete": self._delete,
            "clear": self._clear,
        }

    async def dispatch(self, argv: Sequence[str]) -> int:
        command, *args = list(argv) or [""]
        handler = self._commands.get(command)
        if handler is None:
            logger.debug("[Dispatcher] no handler for %r, showing help", command)
            self.echo(HELP_TEXT)
            return EXIT_OK
        logger.info("[Dispatcher] %s args=%s", command, args)
        return await handler(args)

    def _finish(
        self,
        result: OperationResult[T],
        render: Callable[[T], List[str]],
    ) -> int:
        if not result.ok:
            self.echo_error(f"Error: {result.error}")
            return EXIT_FAILURE
        for line in render(result.value):
            self.echo(line)
        return EXIT_OK

    def _message(self, text: str) -> int:
        self.echo(text)
        return EXIT_OK

    async def _list(self, args: List[str]) -> int:
        result = await self.service.select_all()
        return self._finish(result, lambda listing: formatter.render_listing(listing, 1))

    async def _add(self, args: List[str]) -> int:
        if not _provided(args, 2):
            return self._message(MISSING_ADD_ARGS)
        amount, memo = args[0], args[1]
        created_on: Optional[str] = args[2] if _provided(args, 3) else None
        result = await self.service.insert(amount, memo, created_on)
        return self._finish(result, lambda _: [])

    async def _search(self, args: List[str]) -> int:
        if not _provided(args, 1):
            return self._message(MISSING_SEARCH_TERM)
        result = await self.service.search(args[0])
        return self._finish(result, lambda listing: formatter.render_listing(listing, 2))

    async def _delete(self, args: List[str]) -> int:
        if not _provided(args, 1):
            return self._message(MISSING_EXPENSE_ID)
        expense_id = args[0]
        result = await self.service.delete_by_id(expense_id)
        return self._finish(
            result,
            lambda deleted: (
                formatter.render_deleted(deleted)
                if deleted is not None
                else formatter.render_missing(expense_id)
            ),
        )

    async def _clear(self, args: List[str]) -> int:
        try:
            confirmed = await asyncio.to_thread(self.confirm, CLEAR_PROMPT)
        except (EOFError, KeyboardInterrupt):
            # closed or interrupted stdin counts as "no"
            confirmed = False
        if not confirmed:
            return self._message("Nothing was deleted.")
        result = await self.service.delete_all()
        return self._finish(result, lambda _: ["All expenses have been deleted."])


def _provided(args: List[str], count: int) -> bool:
    """True when the first ``count`` arguments exist and are not blank."""
    return len(args) >= count and all(a.strip() for a in args[:count])
