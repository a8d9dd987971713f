"""Project-wide constants for the Eliza CLI."""

ELIZA_VERSION = "0.2.0"

# Profile directory layout (relative to the user's home unless ELIZA_HOME is set)
ELIZA_HOME_DIRNAME = ".eliza"
DB_DIRNAME = "db"
LOGS_DIRNAME = "logs"
ENV_FILENAME = ".env"
CONFIG_FILENAME = "config.json"

DEFAULT_SERVER_PORT = 3000
DEFAULT_SERVER_HOST = "0.0.0.0"
MAX_SERVER_PORT = 65535

# Delay between sequential agent starts in a multi-agent project
AGENT_START_DELAY_SECONDS = 0.5

DATABASE_PLUGIN = "pglite"

# Project discovery
PACKAGE_MANIFEST_FILENAME = "package.json"
MANIFEST_SECTION = "eliza"
PROJECT_DESCRIPTOR_FILENAMES = ("project.json", "eliza.json", "agents.json")

CLIENT_ROUTE = "/client"
