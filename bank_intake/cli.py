"""Command-line entry point: interactive menu and batch mode."""

import argparse
from pathlib import Path
from typing import Callable

from bank_intake.config import IntakeConfig, LedgerConfig
from bank_intake.exceptions import ConfigurationError, RequestSourceError, SinkError
from bank_intake.logging import get_logger, setup_logging
from bank_intake.pipeline import AdmissionPipeline, BatchSummary, process_request_file
from bank_intake.sinks.audit_log import AuditLog
from bank_intake.sinks.console import ConsoleSink
from bank_intake.sinks.json_file import JsonFileSink
from bank_intake.sinks.table import TableFileSink
from bank_intake.store.session import BatchSession

logger = get_logger(__name__)

MENU = """
--- Bank Account Menu ---
1) Process all new checking account requests (once)
2) Print successfully created accounts to screen
3) Print invalid records to screen
4) Print the log file
5) Quit and write accounts to output file"""

QUIT_CHOICE = "5"


class IntakeApp:
    """One run of the intake tool: a batch session plus its sinks."""

    def __init__(self, config: IntakeConfig, console: ConsoleSink | None = None) -> None:
        self.config = config
        self.session = BatchSession.from_config(config)
        self.audit = AuditLog(config.files.log_file)
        self.console = console or ConsoleSink(decimals=config.ledger.decimals)
        self._consumed = False

    def start(self) -> None:
        self.audit.start()

    def process_requests(self) -> BatchSummary | None:
        """Process the request file; None when a file cannot be opened.

        The file is consumed by the first successful run. Later runs see an
        exhausted source and admit nothing.
        """
        if self._consumed:
            summary = AdmissionPipeline(self.session, self.audit).run([])
            self.console.write_summary(summary)
            return summary

        files = self.config.files
        try:
            summary = process_request_file(
                self.session,
                self.audit,
                files.input_file,
                files.error_file,
                policy=self.config.policy,
                max_overdraft=self.config.ledger.max_overdraft,
            )
        except (RequestSourceError, SinkError) as e:
            print(e)
            return None
        self._consumed = True
        self.console.write_summary(summary)
        return summary

    def print_accounts(self) -> None:
        self.console.write_accounts(self.session.accounts)

    def print_invalid_records(self) -> None:
        self.console.write_rejections(self.session.rejections)

    def print_log(self) -> None:
        self.console.write_lines(self.audit.read_lines())

    def write_accounts(self) -> bool:
        """Write the account table (and JSON export when configured)."""
        files = self.config.files
        try:
            count = TableFileSink(files.output_file, self.config.ledger.decimals).write_accounts(
                self.session.accounts
            )
        except SinkError as e:
            print(e)
            return False
        print(f"Wrote {count} account(s) to {files.output_file}")

        if files.json_output_dir is not None:
            try:
                sink = JsonFileSink(files.json_output_dir, pretty=True)
                sink.write_batch("accounts", list(self.session.accounts))
                sink.write_batch("invalid_records", list(self.session.rejections), flat=False)
            except (OSError, SinkError) as e:
                print(f"JSON export failed: {e}")
                return False
            sink.close()
        return True

    def handle(self, choice: str) -> bool:
        """Run one menu choice; return False when the menu should exit."""
        if choice == "1":
            self.process_requests()
        elif choice == "2":
            self.print_accounts()
        elif choice == "3":
            self.print_invalid_records()
        elif choice == "4":
            self.print_log()
        elif choice == QUIT_CHOICE:
            self.write_accounts()
            return False
        else:
            print("Invalid choice.")
        return True


def run_menu(app: IntakeApp, read: Callable[[str], str] | None = None) -> None:
    """Prompt for menu choices until the quit choice or end of input."""
    read = read or input
    while True:
        print(MENU)
        try:
            choice = read("Choice: ").strip()
        except EOFError:
            print()
            logger.info("End of input; leaving without writing accounts")
            return
        print()
        if not app.handle(choice):
            return


def run_batch(app: IntakeApp) -> int:
    """Process, print and write in one go; return the exit code."""
    if app.process_requests() is None:
        return 1
    app.print_accounts()
    return 0 if app.write_accounts() else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-intake",
        description="Validate checking-account requests and admit them into a fixed-capacity ledger.",
    )
    parser.add_argument("--input", type=Path, default=None, help="Request file (default: requests.txt)")
    parser.add_argument("--output", type=Path, default=None, help="Account table file (default: new_accounts.txt)")
    parser.add_argument(
        "--errors", type=Path, default=None, help="Rejected-record file (default: invalid_records.txt)"
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Audit log file (default: bank_log.txt)")
    parser.add_argument("--json-dir", type=Path, default=None, help="Also export accounts and rejections as JSON")
    parser.add_argument("--max-accounts", type=int, default=None, help="Ledger capacity (default: 200)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for account identifiers")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Application log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format", type=str, default=None, choices=["standard", "json"], help="Application log format"
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Process requests, print and write accounts, then exit (no menu)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> IntakeConfig:
    """Environment-based configuration with command-line overrides applied."""
    config = IntakeConfig.from_env()
    files = config.files
    if args.input is not None:
        files.input_file = args.input
    if args.output is not None:
        files.output_file = args.output
    if args.errors is not None:
        files.error_file = args.errors
    if args.log_file is not None:
        files.log_file = args.log_file
    if args.json_dir is not None:
        files.json_output_dir = args.json_dir
    if args.max_accounts is not None:
        config.ledger = LedgerConfig(
            max_accounts=args.max_accounts,
            max_overdraft=config.ledger.max_overdraft,
            decimals=config.ledger.decimals,
        )
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, format_type=config.log_format)

    app = IntakeApp(config)
    app.start()
    if args.batch:
        return run_batch(app)
    run_menu(app)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
