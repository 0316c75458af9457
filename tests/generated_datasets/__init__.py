# tests/generated_datasets/__init__.py

"""
Generated Datasets Sub-Package for Entropy Decision Tree Tests
"""

# Each generator returns a list of row dicts holding the feature columns,
# TARGET_COLUMN (integer class label) and an 'id'.
