"""
Solver configuration for Color Swapper.

Classes:
    SolverOptions: Clipping prevention settings passed to the solver
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from CS_Libs.constants import DEFAULT_MAX_ROW_SUM


@dataclass(frozen=True)
class SolverOptions:
    """Options controlling the clipping-safe row rescaling.

    Attributes:
        prevent_clipping: If True, bound each row's absolute sum by max_row_sum
        max_row_sum: Row sum bound in percent (must be positive)
    """
    prevent_clipping: bool = True
    max_row_sum: float = DEFAULT_MAX_ROW_SUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "prevent_clipping", bool(self.prevent_clipping))
        object.__setattr__(self, "max_row_sum", float(self.max_row_sum))
        if self.max_row_sum <= 0:
            raise ValueError(f"max_row_sum must be positive, got {self.max_row_sum}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverOptions":
        """Create from dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)
