"""
Configuration constants for wordgraph.

All paths, settings, and tunable parameters are defined here.  Values can
be overridden from the environment or from a `.env` file at the project
root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is the directory holding this file
PROJECT_ROOT = Path(__file__).parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Construction
# =============================================================================

# Candidate strategy for build_from_lines: "indexed" or "pairwise"
BUILD_STRATEGY = os.environ.get("WORDGRAPH_STRATEGY", "indexed")

# Text encoding of word files
WORD_FILE_ENCODING = os.environ.get("WORDGRAPH_ENCODING", "utf-8")

# =============================================================================
# HTTP Server
# =============================================================================

SERVER_HOST = os.environ.get("WORDGRAPH_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("WORDGRAPH_PORT", "5000"))

# Largest word list accepted by POST /api/graph
MAX_LINES = int(os.environ.get("WORDGRAPH_MAX_LINES", "100000"))

# Graphs kept in memory by the HTTP server; the least recently used is dropped
MAX_GRAPHS = int(os.environ.get("WORDGRAPH_MAX_GRAPHS", "32"))

# Session signing key; a random one is generated per process when unset
SECRET_KEY = os.environ.get("WORDGRAPH_SECRET_KEY")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("WORDGRAPH_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
