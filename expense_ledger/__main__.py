from expense_ledger.main import run

run()
