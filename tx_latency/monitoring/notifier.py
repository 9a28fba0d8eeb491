"""
Alert Notifiers

Slack chat.postMessage delivery, or console output when Slack isn't
configured. Delivery is fire-and-forget: ``dispatch`` runs it on a daemon
thread and only logs failures.
"""

import threading
from typing import Protocol

import requests

from tx_latency.core.config import AlertConfig
from tx_latency.core.outcome import Outcome


class Notifier(Protocol):
    def deliver(self, message: str) -> Outcome: ...


class SlackNotifier:
    """Posts alerts to a Slack channel."""

    def __init__(self, config: AlertConfig):
        self.config = config

    def deliver(self, message: str) -> Outcome:
        try:
            resp = requests.post(
                self.config.slack_api_url,
                json={
                    "channel": self.config.slack_channel,
                    "mrkdwn": True,
                    "text": message,
                },
                headers={
                    "Content-type": "application/json",
                    "Authorization": f"Bearer {self.config.slack_auth}",
                },
                timeout=self.config.timeout_sec,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            return Outcome.failure(f"slack delivery failed: {e}")
        return Outcome.success()


class ConsoleNotifier:
    """Prints alerts to stdout."""

    def deliver(self, message: str) -> Outcome:
        print(f"[ALERT] {message}")
        return Outcome.success()


def build_notifier(config: AlertConfig) -> Notifier:
    if config.slack_api_url:
        return SlackNotifier(config)
    return ConsoleNotifier()


def _deliver_and_log(notifier: Notifier, message: str):
    try:
        outcome = notifier.deliver(message)
    except Exception as e:
        outcome = Outcome.failure(str(e))
    if not outcome.ok:
        print(f"[Notifier] Alert delivery failed: {outcome.error}")


def dispatch(notifier: Notifier, message: str) -> threading.Thread:
    """
    Deliver an alert in the background.

    Returns:
        The started daemon thread (callers never need to join it)
    """
    worker = threading.Thread(
        target=_deliver_and_log,
        args=(notifier, message),
        name="alert-dispatch",
        daemon=True,
    )
    worker.start()
    return worker
