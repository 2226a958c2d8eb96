"""Workshop catalog."""
