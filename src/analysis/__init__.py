"""Throughput analysis over counter snapshots."""
from .rates import RateTotals, compute_rates, counter_delta
