"""Utility helpers for ideagraph."""
