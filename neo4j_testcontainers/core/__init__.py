"""Core functionality for neo4j_testcontainers."""

from .builder import Neo4j
from .container_runner import DockerContainerState, Neo4jContainer
from .image import ContainerState, IpFamily, Neo4jImage
from .plugins import CustomPlugin, Neo4jLabsPlugin

__all__ = [
    'Neo4j',
    'Neo4jImage',
    'Neo4jContainer',
    'DockerContainerState',
    'ContainerState',
    'IpFamily',
    'Neo4jLabsPlugin',
    'CustomPlugin',
]
