"""Test-support endpoints."""
