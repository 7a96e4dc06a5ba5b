"""Access tier queries."""

from .get_feature_access import (
    FeatureAccessSnapshot,
    GetFeatureAccessHandler,
    GetFeatureAccessQuery,
)

__all__ = [
    "FeatureAccessSnapshot",
    "GetFeatureAccessQuery",
    "GetFeatureAccessHandler",
]
