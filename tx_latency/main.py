"""
Main entry point for the transaction latency measurement bot.

Wires all components: Scheduler → Cycle (Balance → Probe → Fees → Record) → Reporter.
"""

import sys
import argparse
from pathlib import Path
from dotenv import load_dotenv

from tx_latency.core.config import Config
from tx_latency.core.cycle import MeasurementCycle
from tx_latency.core.scheduler import Scheduler
from tx_latency.execution.probe import TransferProbe
from tx_latency.monitoring.balance import AccountHealthMonitor
from tx_latency.monitoring.notifier import build_notifier
from tx_latency.pricing.fees import FeeCalculator
from tx_latency.pricing.oracle import CoinGeckoOracle
from tx_latency.reporting.reporter import Reporter
from tx_latency.utils.timing import now_ms


class LatencyMeasurementSystem:
    """
    Main orchestrator.

    Builds the long-lived ledger session and the collaborators around it,
    then drives one measurement cycle per scheduler tick.
    """

    def __init__(self, config: Config, ledger=None, oracle=None, notifier=None, reporter=None):
        """
        Initialize the bot.

        Args:
            config: System configuration
            ledger, oracle, notifier, reporter: Optional pre-built collaborators
        """
        self.config = config

        errors = config.validate()
        if errors:
            print("[ERROR] Configuration validation failed:")
            for err in errors:
                print(f"  - {err}")
            sys.exit(1)

        print(f"[Init] Starting {config.hedera.network} latency measurement (chain {config.hedera.chain_id})")

        if ledger is None:
            from tx_latency.ledger.hedera import HederaLedgerClient

            ledger = HederaLedgerClient(config.hedera)
        self.ledger = ledger

        self.oracle = oracle or CoinGeckoOracle(config.price)
        self.notifier = notifier or build_notifier(config.alert)
        self.reporter = reporter or Reporter(config.upload)

        self.probe = TransferProbe(
            self.ledger,
            probe_amount_hbar=config.probe.amount_hbar,
            max_receipt_attempts=config.probe.max_receipt_attempts,
            receipt_retry_delay_sec=config.probe.receipt_retry_delay_sec,
        )
        self.health_monitor = AccountHealthMonitor(
            self.ledger,
            self.notifier,
            floor_hbar=config.alert.balance_floor_hbar,
            scope_url=config.hedera.scope_url,
        )
        self.cycle = MeasurementCycle(
            self.ledger,
            self.probe,
            FeeCalculator(self.oracle),
            chain_id=config.hedera.chain_id,
            health_monitor=self.health_monitor,
            reporter=self.reporter,
        )
        self.scheduler = Scheduler(config.schedule.interval_sec, self.cycle.run_and_report)

        print("[Init] All components initialized")

    def run_once(self):
        """Run a single cycle in the foreground."""
        return self.cycle.run_and_report()

    def run(self):
        """Run the bot (blocks indefinitely)."""
        print(f"[Main] starting tx latency measurement... start time = {now_ms()}")
        try:
            self.scheduler.run_forever()
        except KeyboardInterrupt:
            print("\n[Main] Shutdown signal received")
        finally:
            self.scheduler.stop()
            print(
                f"[Main] Goodbye! cycles={self.cycle.cycles_run} failed={self.cycle.cycles_failed} "
                f"skipped_ticks={self.scheduler.skipped_ticks}"
            )


def main():
    """CLI entry point."""
    print("=" * 60)
    print("  TX LATENCY MEASUREMENT - Hedera")
    print("=" * 60)

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="", help="Path to YAML config file")
    parser.add_argument("--once", action="store_true", help="Run a single measurement cycle and exit")
    args = parser.parse_args()

    # Load .env if present (before Config) to populate env overrides
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    system = LatencyMeasurementSystem(config)
    if args.once:
        system.run_once()
    else:
        system.run()


if __name__ == "__main__":
    main()
