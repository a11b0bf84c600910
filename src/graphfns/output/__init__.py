"""Output layer — text renderings of graphs for humans and external tools."""
