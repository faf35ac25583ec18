"""Test suite for the gptbot engines."""
