from .builder import GraphSnapshot, build_graph_snapshot

__all__ = ["GraphSnapshot", "build_graph_snapshot"]
