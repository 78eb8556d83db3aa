"""Infrastructure adapters: auth primitives, persistence and messaging."""
