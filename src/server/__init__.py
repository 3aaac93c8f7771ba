"""HTTP API serving the docs config and raw documents."""
