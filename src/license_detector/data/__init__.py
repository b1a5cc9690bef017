"""Canonical reference texts for the license catalog, one file per identifier."""
