"""CLI adapter printing ledger reports as JSON.

Examples::

    ledger-report balance-sheet --level 2 --year 2024
    ledger-report income-statement
    ledger-report transactions --limit 20
    ledger-report cash-flow --start 2024-01-01 --end 2024-12-31
"""

import argparse
from datetime import date
import json
import sys

from ledger_dashboard.application.ports.ledger_client import (
    LedgerClientError,
    LedgerClientPort,
)
from ledger_dashboard.domain.errors import InvalidArgumentError
from ledger_dashboard.infrastructure.container import (
    build_account_assets_use_case,
    build_balance_sheet_use_case,
    build_cash_flow_use_case,
    build_income_statement_use_case,
    build_ledger_client,
    build_transactions_use_case,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger
from ledger_dashboard.utils.serialization import to_payload


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-report",
        description="Print ledger reports as JSON.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    balance = commands.add_parser("balance-sheet", help="Asset balances")
    balance.add_argument("--level", type=int, default=2)
    balance.add_argument("--year", type=int, default=date.today().year)

    account = commands.add_parser(
        "account-assets",
        help="Balances of one asset account",
    )
    account.add_argument("account")
    account.add_argument("--year")

    commands.add_parser("income-statement", help="Revenues and expenses")

    transactions = commands.add_parser(
        "transactions",
        help="Transaction records",
    )
    transactions.add_argument("--limit", type=int, default=None)

    cash_flow = commands.add_parser("cash-flow", help="Asset movements")
    cash_flow.add_argument("--start", default=None)
    cash_flow.add_argument("--end", default=None)
    return parser


def _run(args: argparse.Namespace, ledger_client: LedgerClientPort):
    """Execute the selected report and return its snapshot."""
    if args.command == "balance-sheet":
        return build_balance_sheet_use_case(ledger_client).execute(
            level=args.level,
            year=args.year,
        )
    if args.command == "account-assets":
        return build_account_assets_use_case(ledger_client).execute(
            args.account,
            args.year,
        )
    if args.command == "income-statement":
        return build_income_statement_use_case(ledger_client).execute()
    if args.command == "transactions":
        records = build_transactions_use_case(ledger_client).execute()
        if args.limit is not None:
            records = records[: args.limit]
        return records
    return build_cash_flow_use_case(ledger_client).execute(
        start_date=args.start,
        end_date=args.end,
    )


def main(argv: list[str] | None = None) -> int:
    """Run a report command.

    Returns:
        int: 0 on success, 2 for invalid arguments, 1 when the ledger backend
        fails.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    ledger_client = build_ledger_client()
    try:
        report = _run(args, ledger_client)
    except InvalidArgumentError as exc:
        logger.warning(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except LedgerClientError as exc:
        logger.error(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        ledger_client.close()

    print(json.dumps(to_payload(report), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
