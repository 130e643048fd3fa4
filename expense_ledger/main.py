import asyncio
import sys
from typing import Optional, Sequence

from expense_ledger.app_containers import ApplicationContainer
from expense_ledger.core.logger import logger
from expense_ledger.core.settings import settings


def main(argv: Optional[Sequence[str]] = None, container: Optional[ApplicationContainer] = None) -> int:
    """Run one ledger command and return its exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)
    container = container or ApplicationContainer()
    logger.debug("%s starting argv=%s", settings.APP_NAME, argv)
    dispatcher = container.dispatcher()
    return asyncio.run(dispatcher.dispatch(argv))


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
