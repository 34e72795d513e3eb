"""Core constants and exceptions for XTabPorter."""
