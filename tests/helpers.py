"""Shared test constants."""

from __future__ import annotations

COMBINING_BREVE = "\u0306"
COMBINING_TILDE = "\u0303"
