# entropy_tree/splitting.py
import time # For performance logging
import numpy as np
from .utils import entropy, unique_in_order

# Running best gain before any candidate is accepted. Information gain is
# non-negative in exact arithmetic, so the first valid candidate always beats it.
NO_SPLIT_GAIN = -1.0


def information_gain(parent_target, left_target, right_target):
    """
    Weighted entropy reduction achieved by partitioning parent into left and right.

        gain = H(parent) - (|left|/|parent| * H(left) + |right|/|parent| * H(right))
    """
    n_parent = len(parent_target)
    if n_parent == 0:
        return 0.0
    left_prop = len(left_target) / n_parent
    right_prop = len(right_target) / n_parent
    return entropy(parent_target) - (left_prop * entropy(left_target) + right_prop * entropy(right_target))


def partition_rows(data, target, feature_idx, threshold):
    """
    Split rows into (feature <= threshold) and the rest, keeping every column
    and the original row order on both sides.

    Returns:
        tuple: (left_data, left_target, right_data, right_target)
    """
    left_mask = data[:, feature_idx] <= threshold
    right_mask = ~left_mask
    return data[left_mask], target[left_mask], data[right_mask], target[right_mask]


def find_best_split_on_feature(
    data: np.ndarray,
    target: np.ndarray,
    feature_idx: int,
    verbose: bool = False,
    node_depth_for_logs: int = 0
):
    best_split = {'gain': NO_SPLIT_GAIN}
    indent = "  " * (node_depth_for_logs + 2)

    feature_vals = data[:, feature_idx]
    thresholds = unique_in_order(feature_vals)
    n_rows = target.size

    if thresholds.size < 2:
        if verbose:
            print(f"{indent}  Feature {feature_idx}: constant column ({feature_vals[0]}), no split possible.")
        return best_split

    for threshold in thresholds:
        left_mask = feature_vals <= threshold
        num_left = int(np.sum(left_mask))

        # An empty side carries no information and would grow zero-row children
        if num_left == 0 or num_left == n_rows:
            continue

        gain = information_gain(target, target[left_mask], target[~left_mask])

        if gain > best_split['gain']:
            best_split['feature'] = feature_idx
            best_split['threshold'] = float(threshold)
            best_split['gain'] = gain

    return best_split


def find_best_split_for_node(
    data: np.ndarray,
    target: np.ndarray,
    verbose: bool = False,
    node_depth_for_logs: int = 0
):
    """
    Exhaustive search over every (feature, threshold) pair of a node's rows.

    Features are visited in column order and thresholds in first-seen order; a
    candidate replaces the current best only on strictly greater gain, so the
    first maximal candidate wins ties.

    Returns:
        dict: {'feature', 'threshold', 'gain', 'left_data', 'left_target',
        'right_data', 'right_target'} for the best split, or {} if no
        candidate leaves both sides non-empty.
    """
    overall_best_split = {'gain': NO_SPLIT_GAIN}
    indent = "  " * (node_depth_for_logs + 1)

    for feature_idx in range(data.shape[1]):
        if verbose:
            t_feat_split_start = time.time()

        current_feature_best_split = find_best_split_on_feature(
            data=data,
            target=target,
            feature_idx=feature_idx,
            verbose=verbose,
            node_depth_for_logs=node_depth_for_logs
        )

        if verbose:
            t_feat_split_end = time.time()
            if current_feature_best_split['gain'] > NO_SPLIT_GAIN:
                print(f"{indent}    Feature {feature_idx} best split: <= {current_feature_best_split['threshold']:.3f}, "
                      f"gain {current_feature_best_split['gain']:.4f}. Took {t_feat_split_end - t_feat_split_start:.4f}s")
            else:
                print(f"{indent}    Feature {feature_idx} did not yield a valid split. Took {t_feat_split_end - t_feat_split_start:.4f}s")

        if current_feature_best_split['gain'] > overall_best_split['gain']:
            overall_best_split = current_feature_best_split

    if overall_best_split['gain'] == NO_SPLIT_GAIN:
        if verbose:
            print(f"{indent}  No valid split found ({target.size} rows, every candidate leaves one side empty).")
        return {}

    left_data, left_target, right_data, right_target = partition_rows(
        data, target, overall_best_split['feature'], overall_best_split['threshold']
    )
    if verbose:
        print(f"{indent}  Overall best split: feature {overall_best_split['feature']} <= "
              f"{overall_best_split['threshold']:.3f}, gain {overall_best_split['gain']:.4f} "
              f"({left_target.size} left / {right_target.size} right)")

    return {
        'feature': overall_best_split['feature'],
        'threshold': overall_best_split['threshold'],
        'gain': overall_best_split['gain'],
        'left_data': left_data,
        'left_target': left_target,
        'right_data': right_data,
        'right_target': right_target,
    }
