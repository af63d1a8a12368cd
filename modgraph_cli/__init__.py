"""ModGraph CLI: module dependency graphs to Graphviz DOT."""

__version__ = "0.1.0"
