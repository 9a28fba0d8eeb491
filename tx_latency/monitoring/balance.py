"""
Account Health Monitor

Checks the operator balance before each probe and raises a low-balance
alert when it drops strictly below the configured floor. Never blocks or
fails the measurement cycle.
"""

import threading
from typing import Optional

from tx_latency.ledger.client import LedgerClient
from tx_latency.monitoring.notifier import Notifier, dispatch


class AccountHealthMonitor:
    """Low-balance watchdog for the operator account."""

    def __init__(
        self,
        ledger: LedgerClient,
        notifier: Notifier,
        floor_hbar: float,
        scope_url: str = "",
    ):
        self.ledger = ledger
        self.notifier = notifier
        self.floor_hbar = floor_hbar
        self.scope_url = scope_url.rstrip("/")
        self.last_balance: Optional[float] = None
        self.last_alert: Optional[threading.Thread] = None

    def check(self) -> Optional[float]:
        """
        Query balance and alert if below floor.

        Returns:
            Balance in HBAR, or None if the query failed
        """
        try:
            balance = float(self.ledger.get_account_balance())
        except Exception as e:
            print(f"[BalanceMonitor] Balance query failed: {e}")
            return None

        self.last_balance = balance
        if self.is_breached(balance):
            self.last_alert = dispatch(self.notifier, self.alert_message(balance))
        return balance

    def is_breached(self, balance: float) -> bool:
        return balance < self.floor_hbar

    def alert_message(self, balance: float) -> str:
        account = self.ledger.operator_account_id
        link = f"<{self.scope_url}/account/{account}|{account}>" if self.scope_url else account
        return (
            f"Current balance of {link} is less than {self.floor_hbar} HBAR! "
            f"balance={balance} HBAR"
        )
