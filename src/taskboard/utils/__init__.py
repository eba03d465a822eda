"""Utilities for the taskboard application."""
