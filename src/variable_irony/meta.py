# src/variable_irony/meta.py

"""Centralized program identity constants for Variable Irony."""

_BASE = "variable-irony"

# CLI script name (the console entrypoint)
PROGRAM_SCRIPT = _BASE

# Human-readable name for banners, help text, etc.
PROGRAM_DISPLAY = _BASE.replace("-", " ").title()

# Python package / import name
PROGRAM_PACKAGE = _BASE.replace("-", "_")

# Environment variable prefix (used for VARIABLE_IRONY_LOG_LEVEL, etc.)
PROGRAM_ENV = _BASE.replace("-", "_").upper()

# Short tagline or description for help screens and metadata
DESCRIPTION = "Environment variables and cached values as plain variables."

VERSION = "0.1.0"
