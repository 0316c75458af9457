# tests/test_stopping.py
import numpy as np

from entropy_tree.stopping import check_pre_split_stopping_conditions, check_post_split_stopping_condition

IMPURE = np.array([0.0, 1.0, 1.0])


def test_min_sample_split_stops():
    reason = check_pre_split_stopping_conditions(
        node_target=IMPURE, node_num_samples=3, current_depth=0, min_sample_split=5, max_depth=5
    )
    assert reason == "min_sample_split (3 < 5)"


def test_max_depth_stops():
    reason = check_pre_split_stopping_conditions(
        node_target=IMPURE, node_num_samples=3, current_depth=5, min_sample_split=1, max_depth=5
    )
    assert reason == "max_depth (5 >= 5)"


def test_pure_node_stops():
    reason = check_pre_split_stopping_conditions(
        node_target=np.array([2.0, 2.0]), node_num_samples=2, current_depth=0, min_sample_split=1, max_depth=5
    )
    assert reason == "pure_node"


def test_zero_max_depth_stops_at_root():
    reason = check_pre_split_stopping_conditions(
        node_target=IMPURE, node_num_samples=3, current_depth=0, min_sample_split=1, max_depth=0
    )
    assert reason.startswith("max_depth")


def test_splittable_node_continues():
    reason = check_pre_split_stopping_conditions(
        node_target=IMPURE, node_num_samples=3, current_depth=2, min_sample_split=3, max_depth=5
    )
    assert reason is None


def test_post_split_condition():
    assert check_post_split_stopping_condition({'feature': 0, 'threshold': 1.0, 'gain': 0.5}) is None
    assert check_post_split_stopping_condition({}) == "no_valid_split"


def test_post_split_condition_verbose(capsys):
    check_post_split_stopping_condition({}, verbose=True, node_depth_for_logs=1)
    assert "no threshold separates the rows" in capsys.readouterr().out
