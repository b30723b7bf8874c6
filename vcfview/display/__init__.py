"""Terminal rendering for the viewer."""
