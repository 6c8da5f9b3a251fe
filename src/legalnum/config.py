import logging
import os

from dotenv import load_dotenv

# Load .env file if exists
load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LEGALNUM_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Batch conversion
OUTPUT_FORMATS = ("yaml", "jsonl")
DEFAULT_OUTPUT_FORMAT = "yaml"


def setup_logging(level: str = LOG_LEVEL):
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)
