# entropy_tree/tree.py
import time
import warnings

import numpy as np

from .exceptions import ShapeMismatch
from .params import DEFAULT_PARAMS, TreeParam
from .splitting import find_best_split_for_node
from .stopping import check_pre_split_stopping_conditions, check_post_split_stopping_condition
from .utils import (
    majority_class,
    as_float_array,
    as_feature_matrix,
    as_training_matrix,
    as_query_row,
    validate_labels
)


class Node:
    is_leaf = False

    def __init__(self, depth, num_samples):
        self.depth = depth
        self.num_samples = num_samples

    def release(self):
        pass


class LeafNode(Node):
    is_leaf = True

    def __init__(self, depth, num_samples, value, leaf_reason=None):
        super().__init__(depth, num_samples)
        self.value = value
        self.leaf_reason = leaf_reason

    def __repr__(self):
        return (f"LeafNode(depth={self.depth}, samples={self.num_samples}, "
                f"value={self.value}, reason='{self.leaf_reason}')")


class DecisionNode(Node):
    def __init__(self, depth, num_samples, feature, threshold, gain, left, right):
        super().__init__(depth, num_samples)
        self.feature = feature
        self.threshold = threshold
        self.gain = gain
        self.left = left
        self.right = right

    def release(self):
        # unlinks the whole subtree without recursing
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                continue
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = None
            node.right = None

    def __repr__(self):
        return (f"DecisionNode(depth={self.depth}, samples={self.num_samples}, "
                f"rule='x[{self.feature}] <= {self.threshold:.3f}', gain={self.gain:.4f})")


class EntropyDecisionTree:
    """
    Binary decision-tree classifier grown with the entropy / information-gain
    criterion (ID3-style) over numeric features.

    Labels must be encoded as 0..nclass-1 (ints or integer-valued floats).
    Predictions are returned in the same float encoding.
    """

    def __init__(
        self,
        max_depth=DEFAULT_PARAMS.max_depth,
        min_sample_split=DEFAULT_PARAMS.min_sample_split,
        verbose=False
    ):
        self.max_depth = max_depth
        self.min_sample_split = min_sample_split
        self.verbose = verbose

        self.root = None
        self.n_features_ = None

    @property
    def params(self):
        return TreeParam(max_depth=self.max_depth, min_sample_split=self.min_sample_split)

    def fit(self, data, target):
        params = self.params.validate()
        feature_matrix = as_training_matrix(data)
        labels = validate_labels(target, feature_matrix.shape[0])

        if self.verbose:
            fit_start_time = time.time()
            print(f"EntropyDecisionTree.fit started. Data has {feature_matrix.shape[0]} rows, "
                  f"{feature_matrix.shape[1]} features. Params: {params.as_dict()}")

        # a failed grow leaves any previously fitted tree in place
        root = self._grow(feature_matrix, labels, depth=0)
        self.root, self.n_features_ = root, feature_matrix.shape[1]

        if self.verbose:
            fit_end_time = time.time()
            print(f"EntropyDecisionTree.fit completed in {fit_end_time - fit_start_time:.4f}s. "
                  f"Total nodes: {self.num_nodes}, leaves: {self.num_leaves}")
        return self

    def _make_leaf(self, target, depth, reason):
        return LeafNode(depth=depth, num_samples=target.size, value=majority_class(target), leaf_reason=reason)

    def _grow(self, data, target, depth):
        indent = "  " * (depth + 1)
        if self.verbose:
            print(f"{indent}Processing node (Depth {depth}): {target.size} samples.")

        # 1. Check pre-split stopping conditions
        stop_reason = check_pre_split_stopping_conditions(
            node_target=target, node_num_samples=target.size, current_depth=depth,
            min_sample_split=self.min_sample_split, max_depth=self.max_depth
        )
        if stop_reason:
            leaf = self._make_leaf(target, depth, stop_reason)
            if self.verbose: print(f"{indent}  Node becomes LEAF (value={leaf.value}). Reason: {stop_reason}")
            return leaf

        # 2. Find the best possible split across all features
        best_split = find_best_split_for_node(
            data=data, target=target, verbose=self.verbose, node_depth_for_logs=depth
        )

        # 3. No threshold separates the rows: force a leaf
        post_stop_reason = check_post_split_stopping_condition(
            best_split, verbose=self.verbose, node_depth_for_logs=depth
        )
        if post_stop_reason:
            warnings.warn(
                f"Node at depth {depth} has {target.size} rows with identical features but differing labels. "
                f"Using the majority label as a leaf.",
                UserWarning
            )
            leaf = self._make_leaf(target, depth, post_stop_reason)
            if self.verbose: print(f"{indent}  Node becomes LEAF (value={leaf.value}). Reason: {post_stop_reason}")
            return leaf

        # 4. Perform the split; each partition is released once its subtree exists
        if self.verbose: print(f"{indent}  Node SPLIT on feature {best_split['feature']} <= {best_split['threshold']:.3f}.")
        left_child = self._grow(best_split.pop('left_data'), best_split.pop('left_target'), depth + 1)
        right_child = self._grow(best_split.pop('right_data'), best_split.pop('right_target'), depth + 1)

        return DecisionNode(
            depth=depth, num_samples=target.size,
            feature=best_split['feature'], threshold=best_split['threshold'], gain=best_split['gain'],
            left=left_child, right=right_child
        )

    def _check_is_fitted(self):
        if self.root is None: raise ValueError("Tree has not been fitted yet.")

    def _traverse_tree(self, node, row):
        while not node.is_leaf:
            node = node.left if row[node.feature] <= node.threshold else node.right
        return node.value

    def predict_one(self, row):
        self._check_is_fitted()
        return self._traverse_tree(self.root, as_query_row(row, self.n_features_))

    def predict(self, data, out=None):
        self._check_is_fitted()

        feature_matrix = as_float_array(data, "Feature data")
        if feature_matrix.ndim != 2 or feature_matrix.shape[1] != self.n_features_:
            raise ShapeMismatch(
                f"Prediction data has shape {feature_matrix.shape}, expected (n_rows, {self.n_features_})."
            )

        n_rows = feature_matrix.shape[0]
        if out is None:
            out = np.empty(n_rows, dtype=float)
        elif len(out) != n_rows:
            raise ShapeMismatch(f"Output buffer has length {len(out)}, expected {n_rows}.")

        for i in range(n_rows):
            out[i] = self._traverse_tree(self.root, feature_matrix[i])
        return out

    def release(self):
        if self.root is not None:
            self.root.release()
        self.root = None
        self.n_features_ = None

    def iter_nodes(self):
        """Yields every node in pre-order (node, then left subtree, then right subtree)."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf:
                stack.append(node.right)
                stack.append(node.left)

    @property
    def num_nodes(self):
        return sum(1 for _ in self.iter_nodes())

    @property
    def num_leaves(self):
        return sum(1 for node in self.iter_nodes() if node.is_leaf)

    @property
    def max_depth_reached(self):
        return max((node.depth for node in self.iter_nodes()), default=0)

    def get_params(self, deep=True):
        return {
            'max_depth': self.max_depth,
            'min_sample_split': self.min_sample_split,
            'verbose': self.verbose
        }

    def print_tree(self, node=None, indent=""):
        if node is None: node = self.root
        if node is None:
            print("Tree is empty")
            return

        stack = [(node, indent)]
        while stack:
            node, indent = stack.pop()
            if node.is_leaf:
                print(f"{indent}Leaf: class={node.value:g} | N={node.num_samples} (Reason: {node.leaf_reason})")
            else:
                print(f"{indent}Split: x[{node.feature}] <= {node.threshold:.3f} (gain={node.gain:.4f}) | N={node.num_samples}")
                stack.append((node.right, indent + "  +--R: "))
                stack.append((node.left, indent + "  |--L: "))


# --- Functional API over flat row-major buffers ---

def train(data, target, ncol, nrow):
    """Grow a tree with the default parameters (max_depth=5, min_sample_split=1)."""
    return train_with_params(data, target, ncol, nrow, DEFAULT_PARAMS)


def train_with_params(data, target, ncol, nrow, params):
    """
    Grow a tree from row-major data.

    Args:
        data: ncol * nrow feature values in row-major order, or a (nrow, ncol) matrix.
        target: nrow class labels encoded 0..nclass-1.
        ncol (int): Number of features.
        nrow (int): Number of samples.
        params (TreeParam): Growth parameters.

    Returns:
        EntropyDecisionTree: The fitted tree.
    """
    if not isinstance(params, TreeParam):
        raise TypeError(f"params must be a TreeParam, got {type(params).__name__}.")
    params.validate()
    feature_matrix = as_feature_matrix(data, ncol, nrow)
    tree = EntropyDecisionTree(max_depth=params.max_depth, min_sample_split=params.min_sample_split)
    return tree.fit(feature_matrix, target)


def predict_one(tree, row):
    return tree.predict_one(row)


def predict_batch(tree, data, ncol, nrow, out=None):
    """One prediction per row of row-major data, in input order."""
    tree._check_is_fitted()
    if ncol != tree.n_features_:
        raise ShapeMismatch(f"Tree was trained on {tree.n_features_} features, got ncol={ncol}.")
    if nrow == 0:
        feature_matrix = np.empty((0, ncol), dtype=float)
    else:
        feature_matrix = as_feature_matrix(data, ncol, nrow)
    return tree.predict(feature_matrix, out=out)


def release(tree):
    tree.release()
