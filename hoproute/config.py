"""
Configuration constants for the hoproute package.

All tunable settings are defined here. Values can be overridden through
environment variables or a .env file at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of hoproute/
PROJECT_ROOT = Path(__file__).parent.parent

# Pick up overrides from a local .env (does not replace real env vars)
load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Graph Configuration
# =============================================================================

# Supported neighbor iteration policies:
# - insertion: neighbors come back in the order their edges were added
# - sorted: neighbors come back in ascending string order
NEIGHBOR_ORDERS = ("insertion", "sorted")

# Default policy for new Graph instances. This also fixes the BFS tie-break.
NEIGHBOR_ORDER = os.environ.get("HOPROUTE_NEIGHBOR_ORDER", "insertion")

# =============================================================================
# Routing Configuration
# =============================================================================

# Separator used when a path is rendered into the router log
PATH_SEPARATOR = " -> "

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_neighbor_order(value: str) -> str:
    """Return value if it names a known neighbor order, else raise ValueError."""
    if value not in NEIGHBOR_ORDERS:
        available = ", ".join(NEIGHBOR_ORDERS)
        raise ValueError(f"Unknown neighbor order '{value}'. Available: {available}")
    return value
