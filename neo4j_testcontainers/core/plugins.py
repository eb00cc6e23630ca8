"""Neo4j Labs plugin references."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union


class Neo4jLabsPlugin(str, Enum):
    """Known Neo4j Labs plugins, valued by their display form."""

    APOC = "apoc"
    APOC_CORE = "apoc-core"
    BLOOM = "bloom"
    STREAMS = "streams"
    GRAPH_DATA_SCIENCE = "graph-data-science"
    NEO_SEMANTICS = "n10s"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (0, self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomPlugin:
    """Plugin not known to this library, passed to the image verbatim."""

    name: str

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def sort_key(self) -> Tuple[int, str]:
        # Custom plugins order after every known plugin
        return (1, self.name)

    def __str__(self) -> str:
        return self.name


PluginRef = Union[Neo4jLabsPlugin, CustomPlugin]


def as_plugin(plugin: Union[PluginRef, str]) -> PluginRef:
    """Coerce a plugin name into a plugin reference.

    Known display names map onto ``Neo4jLabsPlugin``; anything else becomes
    a ``CustomPlugin``.
    """
    if isinstance(plugin, (Neo4jLabsPlugin, CustomPlugin)):
        return plugin
    try:
        return Neo4jLabsPlugin(plugin)
    except ValueError:
        return CustomPlugin(plugin)


def format_plugins(plugins: Iterable[PluginRef]) -> str:
    """Serialize plugins as the NEO4JLABS_PLUGINS value.

    Identical sets give identical output regardless of insertion order.
    """
    unique = sorted(set(plugins), key=lambda plugin: plugin.sort_key)
    return "[" + ",".join(f'"{plugin.display_name}"' for plugin in unique) + "]"
