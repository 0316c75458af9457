# entropy_tree/__init__.py

"""
Entropy Decision Tree Package

ID3-style binary decision-tree classifier over numeric features.
"""

from .exceptions import (
    EntropyTreeError,
    InvalidLabelEncoding,
    ShapeMismatch,
    EmptyDataset,
    InvalidParam
)
from .params import TreeParam
from .tree import (
    EntropyDecisionTree,
    LeafNode,
    DecisionNode,
    train,
    train_with_params,
    predict_one,
    predict_batch,
    release
)

VERSION = "0.1.0"
