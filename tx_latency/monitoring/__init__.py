"""Monitoring & Alerts: operator balance watchdog and alert delivery."""

from tx_latency.monitoring.balance import AccountHealthMonitor
from tx_latency.monitoring.notifier import ConsoleNotifier, SlackNotifier, build_notifier, dispatch

__all__ = ["AccountHealthMonitor", "ConsoleNotifier", "SlackNotifier", "build_notifier", "dispatch"]
