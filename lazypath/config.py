"""
Configuration constants for the lazypath project.

All paths, endpoints and tunable parameters are defined here.
Overrides are read from environment variables - scripts load a local
.env file before importing this module.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of lazypath/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (pre-computed link graphs)
DATA_DIR = Path(os.environ.get("LAZYPATH_DATA_DIR", PROJECT_ROOT / "data"))

# Default msgpack link graph: {source_id: [target_id, ...]}
LINK_GRAPH_PATH = DATA_DIR / "link_graph.msgpack"

# =============================================================================
# Search Configuration
# =============================================================================

# Cost assigned to every link by expanders that have no natural weight
# (e.g. one click on Wikipedia)
DEFAULT_LINK_COST = 1

# Weighted A* weight: f(n) = g(n) + ASTAR_EPSILON * h(n)
# Values below 1 shrink an overestimating heuristic towards admissibility
ASTAR_EPSILON = 0.8

# =============================================================================
# Embedding Heuristic Configuration
# =============================================================================

# sentence-transformers model used by EmbeddingHeuristic.from_sentence_transformer
DEFAULT_EMBEDDING_MODEL = "all-MiniLM-L6-v2"

# Multiplier applied to the cosine distance (0..2) between node and goal
EMBEDDING_HEURISTIC_SCALE = 1.0

# =============================================================================
# Wikipedia Configuration
# =============================================================================

# Base URL for Wikipedia articles
WIKIPEDIA_BASE_URL = "https://en.wikipedia.org/wiki/"

# MediaWiki API endpoint
WIKIPEDIA_API_URL = os.environ.get(
    "WIKIPEDIA_API_URL", "https://en.wikipedia.org/w/api.php"
)

# Rate limiting: minimum seconds between requests
# Set to 0 for max speed, 1.0 to be polite to Wikipedia
WIKIPEDIA_REQUEST_DELAY = float(os.environ.get("WIKIPEDIA_REQUEST_DELAY", "0.0"))

# Request timeout in seconds
WIKIPEDIA_TIMEOUT = 10

# User agent for requests (be a good citizen)
USER_AGENT = "lazypath/0.1 (lazy best-first graph search)"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by the scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def link_graph_available(path: Path = LINK_GRAPH_PATH) -> bool:
    """Check whether a link graph file exists (the default one if no path given)."""
    return Path(path).is_file()
