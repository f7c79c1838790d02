"""Utility helpers for outline2book."""
