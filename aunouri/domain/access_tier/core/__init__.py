"""Core model of access tier gating: value objects, policies, errors, ports."""
