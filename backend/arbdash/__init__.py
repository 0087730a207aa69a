"""Arbitrage Dashboard backend."""
