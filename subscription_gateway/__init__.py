"""Subscription gateway: plans, subscriptions and contact messages over a hosted Postgres store."""

__version__ = "1.0.0"
