"""Sponsorship credit vesting ledger."""

__version__ = "0.1.0"
