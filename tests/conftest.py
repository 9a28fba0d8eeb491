"""Shared fakes for the ledger client, price oracle and notifier."""

import threading

import pytest

from tx_latency.core.outcome import Outcome
from tx_latency.ledger.client import Receipt, SettledRecord


class FakeLedgerClient:
    """Ledger client returning scripted receipt statuses."""

    def __init__(
        self,
        statuses=("SUCCESS",),
        fee=0.0001,
        balance=100.0,
        submit_error=None,
        record_error=None,
        ping_error=None,
        balance_error=None,
    ):
        self.statuses = list(statuses)
        self.fee = fee
        self.balance = balance
        self.submit_error = submit_error
        self.record_error = record_error
        self.ping_error = ping_error
        self.balance_error = balance_error
        self.submitted = []
        self.receipt_queries = 0
        self.record_queries = 0

    @property
    def operator_account_id(self):
        return "0.0.1234"

    def get_network_info(self):
        if self.ping_error:
            raise self.ping_error
        return {"version": "0.50.0"}

    def get_account_balance(self):
        if self.balance_error:
            raise self.balance_error
        return self.balance

    def submit_transfer(self, amount_hbar):
        if self.submit_error:
            raise self.submit_error
        self.submitted.append(amount_hbar)
        return f"0.0.1234@1700000000.{len(self.submitted):09d}"

    def get_receipt(self, handle):
        idx = min(self.receipt_queries, len(self.statuses) - 1)
        self.receipt_queries += 1
        return Receipt(status=self.statuses[idx], transaction_id=handle)

    def get_record(self, handle):
        self.record_queries += 1
        if self.record_error:
            raise self.record_error
        return SettledRecord(transaction_id=handle, transaction_fee=self.fee)

    def transaction_id_of(self, handle):
        return str(handle)


class FakeOracle:
    def __init__(self, rate=0.05, error=None):
        self.rate = rate
        self.error = error
        self.calls = 0

    def fetch_rate(self):
        self.calls += 1
        if self.error:
            return Outcome.failure(self.error)
        return Outcome.success(self.rate)


class RaisingOracle:
    def fetch_rate(self):
        raise ConnectionError("coingecko unreachable")


class RecordingNotifier:
    def __init__(self):
        self.messages = []
        self.delivered = threading.Event()

    def deliver(self, message):
        self.messages.append(message)
        self.delivered.set()
        return Outcome.success()


class StallingNotifier:
    """Blocks delivery until released."""

    def __init__(self):
        self.release = threading.Event()
        self.started = threading.Event()

    def deliver(self, message):
        self.started.set()
        self.release.wait(5)
        return Outcome.failure("timed out")


class StepClock:
    """Epoch-ms clock advancing by a fixed step per call."""

    def __init__(self, start=1_700_000_000_000, step=25):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def ledger():
    return FakeLedgerClient()


@pytest.fixture
def oracle():
    return FakeOracle()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clock():
    return StepClock()
