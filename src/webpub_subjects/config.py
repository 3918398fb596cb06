"""Configuration constants for webpub subjects."""

from pathlib import Path

# Default directories and files
DEFAULT_OUTPUT_DIR = Path("data/subjects")
DEFAULT_OUTPUT_FILE = "subjects.csv"

# BCP 47 tag for undetermined language, used as JSON key for untagged translations
UNDEFINED_LANGUAGE = "und"

# Languages tried (in order) when no undetermined translation is available
FALLBACK_LANGUAGES = ("en",)

# Max warning messages kept as samples in metrics
MAX_WARNING_SAMPLES = 10
