"""Household overview: read-only projection plus caseworker assignment."""
