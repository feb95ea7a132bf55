"""Utility helpers shared across the caption pipeline."""
