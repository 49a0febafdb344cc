"""Simulated AI provider clients."""
