"""Infrastructure layer — adapters onto third-party engines (networkx)."""
