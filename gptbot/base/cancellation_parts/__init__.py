"""Cancellation implementation parts; import from ``gptbot.base.cancellation``."""
