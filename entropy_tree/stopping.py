# entropy_tree/stopping.py
from .utils import is_pure


def check_pre_split_stopping_conditions(
    node_target,
    node_num_samples,
    current_depth,
    min_sample_split,
    max_depth
    ):
    """
    Checks for basic stopping conditions before attempting to find a split.
    This avoids the cost of split-finding for nodes that are already terminal.

    Args:
        node_target (np.ndarray): Labels of the rows that reached the node.
        node_num_samples (int): Number of data points (rows) in the current node.
        current_depth (int): Current depth of the node in the tree.
        min_sample_split (int): Minimum number of samples required in a node to consider splitting.
        max_depth (int): Maximum allowed depth for the tree.

    Returns:
        str or None: A string describing the reason for stopping, or None if no stopping condition is met.
    """

    if node_num_samples < min_sample_split:
        return f"min_sample_split ({node_num_samples} < {min_sample_split})"

    if current_depth >= max_depth:
        return f"max_depth ({current_depth} >= {max_depth})"

    if is_pure(node_target):
        return "pure_node"

    return None


def check_post_split_stopping_condition(best_split, verbose=False, node_depth_for_logs=0):
    """
    Decides whether a node must become a leaf after split search.

    Split search returns an empty dict when every candidate threshold leaves
    one side empty, which happens when all rows share the same feature vector
    while their labels still differ. Such a node is forced to be a leaf.

    Args:
        best_split (dict): Result of find_best_split_for_node.
        verbose (bool): Flag for detailed logging.
        node_depth_for_logs (int): Depth of the node, for log indentation.

    Returns:
        str or None: A string describing the reason for stopping, or None if splitting should proceed.
    """
    if best_split:
        return None

    if verbose:
        indent = "  " * (node_depth_for_logs + 1)
        print(f"{indent}  Post-split check: no threshold separates the rows. Stopping.")
    return "no_valid_split"


if __name__ == '__main__':
    import numpy as np

    print("--- Testing pre-split stopping conditions ---")

    # Scenario 1: Min samples
    stop_reason = check_pre_split_stopping_conditions(
        node_target=np.array([0.0, 1.0]), node_num_samples=2, current_depth=1,
        min_sample_split=5, max_depth=5
    )
    print(f"Scenario 1 (Min samples): {stop_reason}") # Expected: min_sample_split

    # Scenario 2: Max depth
    stop_reason = check_pre_split_stopping_conditions(
        node_target=np.array([0.0, 1.0]), node_num_samples=2, current_depth=5,
        min_sample_split=1, max_depth=5
    )
    print(f"Scenario 2 (Max depth): {stop_reason}") # Expected: max_depth

    # Scenario 3: Pure node
    stop_reason = check_pre_split_stopping_conditions(
        node_target=np.array([1.0, 1.0, 1.0]), node_num_samples=3, current_depth=0,
        min_sample_split=1, max_depth=5
    )
    print(f"Scenario 3 (Pure): {stop_reason}") # Expected: pure_node

    # Scenario 4: No reason to stop
    stop_reason = check_pre_split_stopping_conditions(
        node_target=np.array([0.0, 1.0, 1.0]), node_num_samples=3, current_depth=0,
        min_sample_split=1, max_depth=5
    )
    print(f"Scenario 4 (No stop condition met): {stop_reason}") # Expected: None

    print("\n--- Testing post-split stopping condition ---")
    print(f"Scenario 5 (No valid split): {check_post_split_stopping_condition({}, verbose=True)}")
