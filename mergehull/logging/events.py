"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: hull, config, output, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - hull.*: Hull construction
    - config.*: Run configuration
    - output.*: Files written by run_hull.py
    - error.*: Error conditions
    """

    # ========== Hull Events ==========
    HULL_STARTED = "hull.started"
    """Hull construction started on a validated point set."""

    HULL_COMPLETED = "hull.completed"
    """Hull construction finished."""

    HULL_MERGED = "hull.merge.tangents"
    """Two sibling hulls merged through their common tangents."""

    HULL_COLLINEAR_MERGE = "hull.merge.collinear"
    """Two sibling hulls on one line joined into a single run."""

    HULL_DUPLICATES_DROPPED = "hull.duplicates_dropped"
    """Repeated input points removed before construction."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Run configuration parsed and validated."""

    # ========== Output Events ==========
    RESULT_SAVED = "output.result_saved"
    """Hull vertices written as JSON."""

    RENDER_SAVED = "output.render_saved"
    """Hull image written to disk."""

    # ========== Error Events ==========
    HULL_INPUT_REJECTED = "error.hull_input"
    """Point set rejected before hull construction."""

    CONFIG_ERROR = "error.config"
    """Run configuration missing or invalid."""
