"""Utility helpers for docsnav."""
