"""Quota store adapters."""
