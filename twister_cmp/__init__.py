"""Parity checks against independent MT19937 implementations."""
