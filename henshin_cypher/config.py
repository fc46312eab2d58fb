"""Settings read from the environment.

Attributes:
    LOGGING_LEVEL: Name of the package logging level.
    MAX_INDEX_LENGTH: Longest edge index token the identifier assignor may generate.
    MATRIX_KEYWORD: Marker line that introduces a binary matrix in analysis logs.
"""

import os

LOGGING_LEVEL = os.environ.get("HENSHIN_CYPHER_LOG_LEVEL", "WARNING").upper()
MAX_INDEX_LENGTH = int(os.environ.get("HENSHIN_CYPHER_MAX_INDEX_LENGTH", "2"))
MATRIX_KEYWORD = os.environ.get("HENSHIN_CYPHER_MATRIX_KEYWORD", "binary")
