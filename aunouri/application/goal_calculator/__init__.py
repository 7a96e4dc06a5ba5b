"""Goal calculator use cases."""
