"""Persistence Helpers — demo data loading for fresh databases."""
