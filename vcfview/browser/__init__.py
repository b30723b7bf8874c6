"""Interactive browser: state, commands and key handling."""
