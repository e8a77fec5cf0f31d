"""Rename PDF invoices by issue date and issuer using an LLM."""

__version__ = "0.1.0"
