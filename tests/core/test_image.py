"""Tests for the Neo4jImage runtime handle."""

import threading

import pytest

from neo4j_testcontainers import IpFamily, Neo4j, Neo4jImage
from neo4j_testcontainers.models.runtime import DerivedRuntimeConfig
from neo4j_testcontainers.exceptions import (
    ContainerAlreadyStartedError,
    ContainerNotStartedError,
    ContainerStateError,
)


@pytest.fixture
def image():
    return Neo4j().with_password("Picard123").with_plugins(["apoc"]).build()


class TestNeo4jImage:
    """Test cases for Neo4jImage."""

    def test_engine_facing_properties(self, image):
        """Test what the container engine reads from the image."""
        assert image.image_name == "neo4j"
        assert image.tag == "5"
        assert image.ready_markers == ("Bolt enabled on", "Started.")
        assert image.exposed_ports == (7687, 7474)
        assert list(image.env_vars()) == [
            ("NEO4JLABS_PLUGINS", '["apoc"]'),
            ("NEO4J_AUTH", "neo4j/Picard123"),
        ]

    def test_environment_is_a_copy(self, image):
        """Test callers cannot mutate the derived environment."""
        image.environment["NEO4J_AUTH"] = "none"

        assert image.environment["NEO4J_AUTH"] == "neo4j/Picard123"

    def test_config_changes_do_not_reach_container(self, image):
        """Test edits to the exposed config leave the container environment alone."""
        image.config.environment["NEO4J_AUTH"] = "none"

        assert image.environment["NEO4J_AUTH"] == "neo4j/Picard123"
        assert dict(image.env_vars())["NEO4J_AUTH"] == "neo4j/Picard123"

    def test_source_config_not_shared(self):
        """Test the image keeps its own copy of the derived config."""
        config = DerivedRuntimeConfig(version="5", environment={"NEO4J_AUTH": "none"})
        image = Neo4jImage(config)

        config.environment["NEO4J_AUTH"] = "neo4j/changed"

        assert image.environment == {"NEO4J_AUTH": "none"}

    def test_accessors(self, image):
        """Test credential and version accessors."""
        assert image.version() == "5"
        assert image.user() == "neo4j"
        assert image.password() == "Picard123"

    @pytest.mark.parametrize("accessor", [
        "bolt_uri_ipv4", "bolt_uri_ipv6", "http_uri_ipv4", "http_uri_ipv6",
    ])
    def test_endpoints_before_start(self, image, accessor):
        """Test endpoints fail loudly before the container started."""
        with pytest.raises(ContainerNotStartedError):
            getattr(image, accessor)()

    def test_not_started_is_state_error(self, image):
        """Test precondition failures share the state error base."""
        with pytest.raises(ContainerStateError):
            image.bolt_endpoint(IpFamily.IPV4)

    def test_endpoints_after_start(self, image, container_state):
        """Test endpoints combine loopback and mapped ports."""
        image.on_started(container_state)

        assert image.bolt_uri_ipv4() == "bolt://127.0.0.1:32768"
        assert image.bolt_uri_ipv6() == "bolt://[::1]:32769"
        assert image.http_uri_ipv4() == "http://127.0.0.1:32770"
        assert image.http_uri_ipv6() == "http://[::1]:32771"
        assert image.bolt_endpoint() == image.bolt_uri_ipv4()
        assert image.http_port(IpFamily.IPV6) == 32771

    def test_endpoints_query_state(self, image, container_state):
        """Test the state is asked for the well-known container ports."""
        image.on_started(container_state)

        image.bolt_endpoint(IpFamily.IPV6)
        image.http_endpoint(IpFamily.IPV4)

        assert container_state.calls == [(7687, IpFamily.IPV6), (7474, IpFamily.IPV4)]

    def test_second_start_rejected(self, image, container_state):
        """Test state can only be written once."""
        image.on_started(container_state)

        with pytest.raises(ContainerAlreadyStartedError):
            image.on_started(container_state)

        assert image.bolt_uri_ipv4() == "bolt://127.0.0.1:32768"

    def test_concurrent_start_single_winner(self, image, container_state):
        """Test only one of many concurrent writers succeeds."""
        errors = []
        barrier = threading.Barrier(8)

        def start():
            barrier.wait()
            try:
                image.on_started(container_state)
            except ContainerAlreadyStartedError as e:
                errors.append(e)

        threads = [threading.Thread(target=start) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(errors) == 7
        assert image.is_started

    def test_auth_disabled_accessors(self):
        """Test credential accessors report absent without auth."""
        image = Neo4j().without_authentication().build()

        assert image.user() is None
        assert image.password() is None

    def test_repr(self, image, container_state):
        """Test repr shows image and start state."""
        assert repr(image) == "Neo4jImage(neo4j:5, started=False)"
        image.on_started(container_state)
        assert repr(image) == "Neo4jImage(neo4j:5, started=True)"
