"""Round analytics for hole-by-hole golf logging.

The engine turns per-hole observations into a strokes-gained proxy, flags
critical errors, aggregates rolling windows of rounds and derives coaching
focuses. Everything here is pure; storage and capture live elsewhere.
"""
