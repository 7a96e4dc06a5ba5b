"""Domain layer: pure goal calculation and tier gating logic.

Nothing in this package performs I/O directly; persistence and time are
reached through the ports declared in each domain's ``core/ports``.
"""
