"""AVL trees, sorted-run generation and winner-tree merging for external sorting."""

__version__ = "0.1.0"
__all__ = ["avl", "generator", "natural_selection", "merge"]