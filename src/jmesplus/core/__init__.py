"""Core value helpers.

Durations, reference-time layouts and semantic-version ranges.  These
modules depend only on the standard library and ``semver``; they must not
import from ``functions/``, ``registry/`` or ``cli/``.
"""
from __future__ import annotations
