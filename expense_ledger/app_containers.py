from dependency_injector import containers, providers

from expense_ledger.cli import CommandDispatcher
from expense_ledger.core.settings import settings
from expense_ledger.repositories import ExpenseRepository
from expense_ledger.services import ExpenseService, SchemaService
from expense_ledger.storage.database import Database

class ApplicationContainer(containers.DeclarativeContainer):
    config = providers.Object(settings)

    database = providers.Singleton(
        Database,
        url=config.provided.DATABASE_DSN,
        echo=config.provided.DEBUG,
        ssl=config.provided.DB_SSL,
    )

    expense_repository = providers.Singleton(ExpenseRepository)
    schema_service = providers.Singleton(SchemaService)

    expense_service = providers.Singleton(
        ExpenseService,
        database=database,
        schema_service=schema_service,
        expense_repository=expense_repository,
        debug=config.provided.DEBUG,
    )

    dispatcher = providers.Factory(
        CommandDispatcher,
        service=expense_service,
    )
