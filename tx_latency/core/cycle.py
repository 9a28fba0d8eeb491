"""
Measurement cycle.

One cycle: ping → balance check → probe transfer → fees → record → report.
Every ledger error is caught here and turned into a failed record, so the
scheduler only ever sees completed cycles.
"""

from typing import Callable, Optional

from tx_latency.execution.probe import TransferProbe
from tx_latency.ledger.client import LedgerClient
from tx_latency.monitoring.balance import AccountHealthMonitor
from tx_latency.pricing.fees import FeeCalculator
from tx_latency.reporting.record import MeasurementRecord, RecordBuilder
from tx_latency.utils.timing import now_ms


class MeasurementCycle:
    """
    Runs the measurement pipeline.

    Collaborators are injected so a fake ledger client can script receipt
    sequences in tests.
    """

    def __init__(
        self,
        ledger: LedgerClient,
        probe: TransferProbe,
        fee_calculator: FeeCalculator,
        chain_id: int,
        health_monitor: Optional[AccountHealthMonitor] = None,
        reporter=None,
        clock: Callable[[], int] = now_ms,
    ):
        self.ledger = ledger
        self.probe = probe
        self.fee_calculator = fee_calculator
        self.chain_id = chain_id
        self.health_monitor = health_monitor
        self.reporter = reporter
        self.clock = clock
        self.cycles_run = 0
        self.cycles_failed = 0

    def run(self) -> MeasurementRecord:
        """
        Execute one measurement.

        Returns:
            A success or failure MeasurementRecord (never raises for ledger errors)
        """
        builder = RecordBuilder(executed_at=self.clock(), chain_id=self.chain_id)
        try:
            record = self._measure(builder)
        except Exception as e:
            print(f"[Cycle] failed to execute. {e}")
            record = builder.failed(str(e) or type(e).__name__)

        self.cycles_run += 1
        if not record.succeeded:
            self.cycles_failed += 1
        return record

    def _measure(self, builder: RecordBuilder) -> MeasurementRecord:
        ping_start = self.clock()
        self.ledger.get_network_info()
        builder.ping_time = max(0, self.clock() - ping_start)

        if self.health_monitor is not None:
            self.health_monitor.check()

        outcome = self.probe.execute()
        builder.start_time = outcome.start_time
        if not outcome.ok:
            print(f"[Cycle] failed to execute. {outcome.error_description}")
            return builder.failed(outcome.error_description)

        fees = self.fee_calculator.compute(outcome.native_fee)
        record = builder.succeeded(outcome, fees)
        print(
            f"[Cycle] {record.transaction_id} latency={record.latency}ms "
            f"fee={record.native_fee} HBAR (${record.reference_fee:.6f}) ping={record.ping_time}ms"
        )
        return record

    def run_and_report(self) -> MeasurementRecord:
        """Run one cycle and hand the record to the reporter."""
        record = self.run()
        if self.reporter is not None:
            try:
                self.reporter.report(record)
            except Exception as e:
                print(f"[Cycle] Reporting failed: {e}")
                print(record.to_json())
        return record
