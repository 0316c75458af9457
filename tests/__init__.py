# tests/__init__.py

"""
Testing Package for Entropy Decision Tree
"""

# This file makes the `tests` directory a Python package, so the accuracy
# suite can import the harness and the dataset generators:
# from tests.test_harness import run_test_scenario
# from tests.generated_datasets import dataset_generator_numerical
