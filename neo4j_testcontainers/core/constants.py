"""Constants used throughout neo4j_testcontainers."""


# Image
IMAGE_NAME = "neo4j"
ENTERPRISE_SUFFIX = "-enterprise"

# Defaults shared by the fresh and the environment-seeded builders
DEFAULT_VERSION_TAG = "5"
DEFAULT_USER = "neo4j"
DEFAULT_PASSWORD = "password"

# Process environment overrides (stable names, CI suites rely on them)
VERSION_TAG_ENV = "NEO4J_VERSION_TAG"
USER_ENV = "NEO4J_TEST_USER"
PASSWORD_ENV = "NEO4J_TEST_PASS"

# Container environment keys
AUTH_ENV_KEY = "NEO4J_AUTH"
AUTH_DISABLED_TOKEN = "none"
PLUGINS_ENV_KEY = "NEO4JLABS_PLUGINS"
PASSWORD_LENGTH_ENV_KEY = "NEO4J_dbms_security_auth__minimum__password__length"
LICENSE_ENV_KEY = "NEO4J_ACCEPT_LICENSE_AGREEMENT"
LICENSE_ENV_VALUE = "yes"

# Neo4j refuses to start with passwords shorter than this
MIN_PASSWORD_LENGTH = 8

# Enterprise license acceptance side channel
LICENSE_ACCEPTANCE_FILE = "container-license-acceptance.txt"

# Ports inside the container
BOLT_PORT = 7687
HTTP_PORT = 7474

# Loopback hosts used to build endpoint URIs
LOOPBACK_IPV4 = "127.0.0.1"
LOOPBACK_IPV6 = "[::1]"

# Log lines that must both appear before the server accepts connections
READY_MARKERS = ("Bolt enabled on", "Started.")

# Timeout values
STARTUP_TIMEOUT = 120  # 2 minutes
LOG_POLL_INTERVAL = 0.5
STOP_TIMEOUT = 10

# Container configuration
CONTAINER_PREFIX = "neo4j-testcontainer"
CONTAINER_LABEL = "neo4j-testcontainers"
