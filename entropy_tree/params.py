# entropy_tree/params.py
import numbers
from dataclasses import dataclass

from .exceptions import InvalidParam


@dataclass(frozen=True)
class TreeParam:
    """Hyper-parameters steering tree growth.

    Parameters
    ----------
    max_depth:
        Maximum depth of the tree. The root sits at depth 0, so
        ``max_depth=0`` yields a single leaf.
    min_sample_split:
        Minimum number of rows a node needs before a split is attempted.
    """

    max_depth: int = 5
    min_sample_split: int = 1

    def validate(self):
        for name in ('max_depth', 'min_sample_split'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParam(f"{name} must be an integer, got {value!r}.")
        if self.max_depth < 0:
            raise InvalidParam(f"max_depth must be >= 0, got {self.max_depth}.")
        if self.min_sample_split < 1:
            raise InvalidParam(f"min_sample_split must be >= 1, got {self.min_sample_split}.")
        return self

    def as_dict(self):
        return {'max_depth': self.max_depth, 'min_sample_split': self.min_sample_split}


DEFAULT_PARAMS = TreeParam()
