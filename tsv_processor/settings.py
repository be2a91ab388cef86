# tsv_processor/settings.py
import os
from pathlib import Path

LOG_LEVEL = os.getenv("TSV_LOG_LEVEL", "INFO")

# Where the CLI writes <timestamp>processed.tsv when no --output is given.
OUTPUT_DIR = Path(os.getenv("TSV_OUTPUT_DIR", "."))
