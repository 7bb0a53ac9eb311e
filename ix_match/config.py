"""
Configuration constants for ix-match.
"""

# --- File Type Definitions ---
# Phase One raw captures; compared case-insensitively
IIQ_EXT = '.iiq'

# --- Timestamp Parsing ---
# Stems start with e.g. 210101_120000100 (yymmdd_HHMMSS + milliseconds)
TIMESTAMP_PREFIX_LEN = 16
TIMESTAMP_PATTERN = r'^(\d{2})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})(\d{3})$'

# --- Matching ---
DEFAULT_THRESHOLD_MS = 200

# --- Camera Directory Discovery ---
RGB_DIR_PATTERN = "C*_RGB"
NIR_DIR_PATTERN = "C*_NIR"

# --- Organization ---
UNMATCHED_DIR_NAME = "unmatched"
EMPTY_DIR_NAME = "empty"
