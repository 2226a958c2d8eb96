"""Workshop materials (external resource links)."""
