"""Configuration classes for primepath components."""

from dataclasses import dataclass


@dataclass
class EnumerationConfig:
    """Thresholds for warning about expensive exhaustive enumeration.

    Enumeration is never cut short; these values only decide when a warning
    is logged before the search starts.
    """

    # Vertex count above which a graph is considered large
    large_graph_vertices: int = 16

    # Average out-degree above which a graph is considered dense
    dense_graph_out_degree: float = 3.0

    def is_expensive(self, vertex_count: int, edge_count: int) -> bool:
        """Return True if a graph of this size is likely to blow up the output."""
        if vertex_count > self.large_graph_vertices:
            return True
        if vertex_count == 0:
            return False
        return edge_count / vertex_count > self.dense_graph_out_degree


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
