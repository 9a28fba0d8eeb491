"""
Hedera ledger client.

Thin adapter over the Hiero (Hedera) Python SDK exposing the operations the
measurement pipeline needs. One instance holds the long-lived authenticated
session and is shared by every cycle.

Fees (approximate, mainnet):
- Account balance query: free
- Transfer transaction: $0.0001
- Transaction record query: $0.0001
"""

from typing import Any

from hiero_sdk_python import (
    AccountId,
    Client,
    CryptoGetAccountBalanceQuery,
    Network,
    PrivateKey,
    ResponseCode,
    TransactionGetReceiptQuery,
    TransactionRecordQuery,
    TransferTransaction,
)
from hiero_sdk_python.exceptions import MaxAttemptsError

from tx_latency.core.config import HederaConfig
from tx_latency.ledger.client import Receipt, SettledRecord, STATUS_UNKNOWN


TINYBARS_PER_HBAR = 100_000_000


def hbar_to_tinybars(amount_hbar: float) -> int:
    return int(round(amount_hbar * TINYBARS_PER_HBAR))


def tinybars_to_hbar(tinybars: int) -> float:
    return tinybars / TINYBARS_PER_HBAR


def status_name(status: Any) -> str:
    """Normalize an SDK status code to its response code name."""
    if isinstance(status, str):
        return status
    try:
        return ResponseCode(int(status)).name
    except (ValueError, TypeError):
        return str(status)


class HederaLedgerClient:
    """
    Ledger client backed by the Hiero SDK.

    The submission handle is the SDK TransactionId; receipts and records
    are re-queried against that same id.
    """

    def __init__(self, config: HederaConfig):
        """
        Connect to the configured network and set the operator.

        Args:
            config: Network selection and operator credentials
        """
        self.config = config
        self.client = Client(Network(network=config.network))
        self._operator_id = AccountId.from_string(config.account_id)
        self._operator_key = PrivateKey.from_string(config.private_key)
        self.client.set_operator(self._operator_id, self._operator_key)
        self._pending_balance = None
        print(f"[Hedera] Connected to {config.network} as {self._operator_id}")

    @property
    def operator_account_id(self) -> str:
        return str(self._operator_id)

    def get_network_info(self) -> Any:
        # The Hiero SDK has no network version query, so the ping times a
        # free balance query. Its response is kept for the next
        # get_account_balance call in the same cycle.
        self._pending_balance = self._query_balance()
        return self._pending_balance

    def get_account_balance(self) -> float:
        balance, self._pending_balance = self._pending_balance, None
        if balance is None:
            balance = self._query_balance()
        return tinybars_to_hbar(balance.hbars.to_tinybars())

    def _query_balance(self) -> Any:
        return CryptoGetAccountBalanceQuery().set_account_id(self._operator_id).execute(self.client)

    def submit_transfer(self, amount_hbar: float) -> Any:
        """
        Sign and submit a net-zero transfer on the operator account.

        Returns:
            TransactionId of the submitted transaction
        """
        tinybars = hbar_to_tinybars(amount_hbar)
        # Sender and recipient values must net zero
        transaction = (
            TransferTransaction()
            .add_hbar_transfer(self._operator_id, tinybars)
            .add_hbar_transfer(self._operator_id, -tinybars)
            .freeze_with(self.client)
            .sign(self._operator_key)
        )
        # Receipt is polled separately through get_receipt
        response = transaction.execute(self.client, wait_for_receipt=False)
        return response.transaction_id

    def get_receipt(self, handle: Any) -> Receipt:
        """
        One receipt query for the submission.

        The SDK retries UNKNOWN/BUSY/RECEIPT_NOT_FOUND internally and raises
        MaxAttemptsError when they persist; that is reported as UNKNOWN.
        """
        query = TransactionGetReceiptQuery().set_transaction_id(handle).set_max_attempts(1)
        try:
            receipt = query.execute(self.client)
        except MaxAttemptsError as e:
            print(f"[Hedera] Receipt for {handle} not final yet: {e}")
            return Receipt(status=STATUS_UNKNOWN, transaction_id=str(handle))
        return Receipt(status=status_name(receipt.status), transaction_id=str(handle))

    def get_record(self, handle: Any) -> SettledRecord:
        record = TransactionRecordQuery().set_transaction_id(handle).execute(self.client)
        return SettledRecord(
            transaction_id=str(handle),
            transaction_fee=tinybars_to_hbar(int(record.transaction_fee)),
        )

    def transaction_id_of(self, handle: Any) -> str:
        return str(handle)
