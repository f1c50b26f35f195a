"""Helpers shared by the runnable scripts."""
