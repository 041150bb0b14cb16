"""Global constants for rfcs.

These values serve as defaults for configuration and scanning.  Values that
may be overridden at runtime are read from the environment by ``rfcs.config``
rather than here.
"""

# Document scanning
RFC_EXTENSIONS = frozenset({"txt", "md", "markdown", "rst", "adoc", "org"})
SKIPPED_DIRS = frozenset({".git"})

# Identifier formatting
IDENTIFIER_MIN_DIGITS = 3
IDENTIFIER_PAD_WIDTH = 3

# Configuration
CONFIG_DIR_ENV = "RFCS_CONFIG_DIR"
GIT_REPO_ENV = "RFCS_GIT_REPO"
GIT_URL_ENV = "RFCS_GIT_URL"
CONFIG_FILENAME = "config.yaml"
CLONE_DIRNAME = "rfcs"
CONFIG_KEYS = ("git.url", "git.repo")

# Git
GIT_TIMEOUT_S = 120
CLONE_TIMEOUT_S = 600
DEFAULT_START_POINT = "HEAD"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
