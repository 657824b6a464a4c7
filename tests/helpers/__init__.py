"""Shared test helpers for i18nbuild tests."""
