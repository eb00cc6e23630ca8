"""Custom exceptions for Neo4j test containers."""


class Neo4jContainerError(Exception):
    """Base exception for all neo4j_testcontainers errors."""

    pass


class ConfigurationError(Neo4jContainerError):
    """Exception raised when a Neo4j configuration is rejected."""

    pass


class InvalidVersion(ConfigurationError):
    """Exception raised when a version literal is not MAJOR[.MINOR[.PATCH]]."""

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(
            f"Invalid Neo4j version '{literal}': expected MAJOR[.MINOR[.PATCH]] "
            "without pre-release or build metadata"
        )


class LicenseNotAccepted(ConfigurationError):
    """Exception raised when the enterprise license has not been accepted."""

    def __init__(self, expected_file_name: str, expected_line: str):
        self.expected_file_name = expected_file_name
        self.expected_line = expected_line
        super().__init__(
            f"Neo4j Enterprise Edition license not accepted. Create a file named "
            f"'{expected_file_name}' in the current working directory containing "
            f"the line '{expected_line}'"
        )


class ContainerStateError(Neo4jContainerError, RuntimeError):
    """Exception raised when the container state contract is violated."""

    pass


class ContainerNotStartedError(ContainerStateError):
    """Exception raised when endpoints are queried before the container started."""

    pass


class ContainerAlreadyStartedError(ContainerStateError):
    """Exception raised when container state is reported more than once."""

    pass

