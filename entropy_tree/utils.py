# entropy_tree/utils.py
import numpy as np
import pandas as pd

from .exceptions import EmptyDataset, InvalidLabelEncoding, ShapeMismatch


def bincount(labels):
    """
    Count occurrences of each class in a label vector.

    The result is dense and has length max(labels) + 1, so labels must already
    be encoded as non-negative integers (see validate_labels).
    """
    labels = np.asarray(labels)
    if labels.size == 0:
        return np.zeros(0, dtype=np.int64)
    return np.bincount(labels.astype(np.int64))


def entropy(labels):
    """
    Shannon entropy of a label vector, in bits.
    H = -sum_c p_c * log2(p_c), skipping classes with p_c == 0.
    An empty vector has entropy 0.0.
    """
    labels = np.asarray(labels)
    if labels.size == 0:
        return 0.0

    proportions = bincount(labels) / labels.size
    proportions = proportions[proportions > 0]
    return float(-np.sum(proportions * np.log2(proportions))) + 0.0


def is_pure(labels):
    """True iff the vector holds exactly one distinct value."""
    return np.unique(np.asarray(labels)).size == 1


def unique_in_order(values):
    """
    Distinct values of a 1-D array in the order they were first observed.
    Candidate thresholds are visited in this order, which fixes tie-breaking.
    """
    values = np.asarray(values)
    _, first_seen = np.unique(values, return_index=True)
    return values[np.sort(first_seen)]


def majority_class(labels):
    """
    Most frequent label, returned as a float.
    Ties go to the smallest class index (np.argmax keeps the first maximum).
    """
    counts = bincount(labels)
    if counts.size == 0:
        raise ValueError("Cannot take the majority class of an empty label vector.")
    return float(np.argmax(counts))


# --- Input Validation Utilities ---

def as_float_array(values, what="Input"):
    try:
        if is_pandas_dataframe(values):
            return convert_pandas_to_matrix(values)
        if isinstance(values, pd.Series):
            return values.to_numpy(dtype=float)
        return np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{what} must contain only numeric values.") from e


def as_feature_matrix(data, ncol, nrow):
    """
    Coerce row-major feature data into a (nrow, ncol) float matrix.

    Accepts a flat sequence of ncol * nrow values or anything already shaped
    (nrow, ncol): nested lists, numpy arrays, or a pandas DataFrame.
    """
    if nrow == 0 or ncol == 0:
        raise EmptyDataset(f"Training data must have at least one row and one column (nrow={nrow}, ncol={ncol}).")
    if nrow < 0 or ncol < 0:
        raise ShapeMismatch(f"nrow and ncol must be non-negative (nrow={nrow}, ncol={ncol}).")

    matrix = as_float_array(data, "Feature data")
    if matrix.ndim == 2 and matrix.shape != (nrow, ncol):
        raise ShapeMismatch(f"Feature matrix has shape {matrix.shape}, expected ({nrow}, {ncol}).")
    if matrix.ndim > 2:
        raise ShapeMismatch(f"Feature data must be flat or 2-D, got {matrix.ndim} dimensions.")
    if matrix.size != ncol * nrow:
        raise ShapeMismatch(f"Feature data holds {matrix.size} values, expected ncol * nrow = {ncol * nrow}.")
    return matrix.reshape(nrow, ncol)


def as_training_matrix(data):
    """Coerce 2-D training data (DataFrame, array, nested lists) to a float matrix."""
    matrix = as_float_array(data, "Feature data")
    if matrix.ndim != 2:
        if matrix.size == 0:
            raise EmptyDataset("Training data cannot be empty.")
        raise ShapeMismatch(f"Training data must be 2-D (rows x features), got {matrix.ndim} dimension(s).")
    if matrix.shape[0] == 0 or matrix.shape[1] == 0:
        raise EmptyDataset(f"Training data cannot be empty (shape {matrix.shape}).")
    return matrix


def as_query_row(row, ncol):
    """Coerce a single query row to a 1-D float vector of length ncol."""
    vector = as_float_array(row, "Query row")
    if vector.ndim != 1 or vector.size != ncol:
        raise ShapeMismatch(f"Query row has shape {vector.shape}, expected ({ncol},).")
    return vector


def validate_labels(target, nrow):
    """
    Check that labels are a length-nrow vector of non-negative integer values
    (stored as floats) and return them as a float array.
    """
    labels = as_float_array(target, "Target")
    if labels.ndim != 1:
        raise ShapeMismatch(f"Target must be 1-D, got shape {labels.shape}.")
    if labels.size != nrow:
        raise ShapeMismatch(f"Target has {labels.size} labels but data has {nrow} rows.")

    if not np.all(np.isfinite(labels)):
        raise InvalidLabelEncoding("Target contains non-finite labels (NaN or inf).")
    if np.any(labels < 0):
        bad = labels[labels < 0][0]
        raise InvalidLabelEncoding(f"Target labels must be non-negative, found {bad}.")
    if np.any(labels != np.floor(labels)):
        bad = labels[labels != np.floor(labels)][0]
        raise InvalidLabelEncoding(f"Target labels must be integer-valued (0..nclass-1), found {bad}.")
    # class indices are counted through int64
    if labels.size and labels.max() >= np.iinfo(np.int64).max:
        raise InvalidLabelEncoding(f"Target label {labels.max()} is too large to be a class index.")
    return labels


# --- Pandas DataFrame Utilities ---

def is_pandas_dataframe(data):
    """Checks if the provided data is a Pandas DataFrame."""
    return isinstance(data, pd.DataFrame)


def convert_pandas_to_matrix(dataframe):
    """
    Converts a Pandas DataFrame to a float matrix, keeping column order.
    """
    if not is_pandas_dataframe(dataframe):
        raise TypeError("Input is not a Pandas DataFrame.")
    return dataframe.to_numpy(dtype=float)


if __name__ == '__main__':
    arr = [1, 2, 3, 3, 4, 5, 4]
    print(f"bincount({arr}): {bincount(arr)}")  # [0 1 1 2 2 1]
    print(f"entropy([0, 0, 1, 1]): {entropy([0, 0, 1, 1])}")  # 1.0
    print(f"entropy([0, 1, 2, 3]): {entropy([0, 1, 2, 3])}")  # 2.0
    print(f"is_pure([1] * 7): {is_pure([1] * 7)}")
    print(f"majority_class([1, 1, 2, 2, 2]): {majority_class([1, 1, 2, 2, 2])}")  # 2.0
    print(f"unique_in_order([3, 1, 3, 2, 1]): {unique_in_order([3, 1, 3, 2, 1])}")  # [3 1 2]
