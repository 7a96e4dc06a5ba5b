"""Access tier use cases."""
