"""Shared CLI types for CF-Lite."""
from enum import Enum


class Axis(str, Enum):
    """Matrix view to search neighbors in."""
    USER = "user"
    ITEM = "item"


class MetricType(str, Enum):
    """Available evaluation metrics."""
    HR_10 = "hr@10"
    HR_20 = "hr@20"
    NDCG_10 = "ndcg@10"
    NDCG_20 = "ndcg@20"
