"""Core model of the goal calculator: value objects, errors, ports."""
