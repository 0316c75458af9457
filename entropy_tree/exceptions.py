# entropy_tree/exceptions.py

"""
Errors raised at the train/predict boundary.

Every error is a ValueError, so callers that already catch ValueError keep
working. All of them are raised before tree growing starts; a tree is either
fully built or not returned at all.
"""


class EntropyTreeError(ValueError):
    """Base class for input errors detected by entropy_tree."""


class InvalidLabelEncoding(EntropyTreeError):
    """A label is negative, non-finite, or not integer-valued."""


class ShapeMismatch(EntropyTreeError):
    """Data, labels, or a query row do not have the expected dimensions."""


class EmptyDataset(EntropyTreeError):
    """Training data has no rows or no columns."""


class InvalidParam(EntropyTreeError):
    """A tree parameter is out of range or of the wrong type."""
