"""Tests for Neo4j Labs plugin references."""

from neo4j_testcontainers.core.plugins import (
    CustomPlugin,
    Neo4jLabsPlugin,
    as_plugin,
    format_plugins,
)


class TestPlugins:
    """Test cases for plugin display names and serialization."""

    def test_display_names(self):
        """Test canonical display forms."""
        assert Neo4jLabsPlugin.APOC.display_name == "apoc"
        assert Neo4jLabsPlugin.APOC_CORE.display_name == "apoc-core"
        assert Neo4jLabsPlugin.GRAPH_DATA_SCIENCE.display_name == "graph-data-science"
        assert Neo4jLabsPlugin.NEO_SEMANTICS.display_name == "n10s"
        assert CustomPlugin("my-plugin").display_name == "my-plugin"

    def test_as_plugin(self):
        """Test strings map onto known plugins or custom ones."""
        assert as_plugin("bloom") is Neo4jLabsPlugin.BLOOM
        assert as_plugin("my-plugin") == CustomPlugin("my-plugin")
        assert as_plugin(Neo4jLabsPlugin.STREAMS) is Neo4jLabsPlugin.STREAMS

    def test_format_plugins(self):
        """Test serialization of a simple set."""
        plugins = {Neo4jLabsPlugin.BLOOM, Neo4jLabsPlugin.APOC}

        assert format_plugins(plugins) == '["apoc","bloom"]'

    def test_format_plugins_custom_after_known(self):
        """Test custom plugins sort after known ones, then by name."""
        plugins = [
            CustomPlugin("zeta"),
            CustomPlugin("alpha"),
            Neo4jLabsPlugin.STREAMS,
            Neo4jLabsPlugin.APOC,
        ]

        assert format_plugins(plugins) == '["apoc","streams","alpha","zeta"]'

    def test_format_plugins_deduplicates(self):
        """Test exact duplicates collapse."""
        plugins = [Neo4jLabsPlugin.APOC, Neo4jLabsPlugin.APOC, CustomPlugin("x"), CustomPlugin("x")]

        assert format_plugins(plugins) == '["apoc","x"]'
