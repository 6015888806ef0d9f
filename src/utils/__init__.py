"""Shared utilities for the reporting system."""
