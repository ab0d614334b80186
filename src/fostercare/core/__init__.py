"""Shared configuration, types, errors and draft helpers."""
