from .distance import (
    Transform,
    compute_table,
    edit_distance,
    feedback,
    reconstruct_transforms,
    transform_list,
)
from .constraints import filter_candidates
from .validation import normalize, validate_guess

__all__ = [
    "Transform",
    "compute_table",
    "reconstruct_transforms",
    "transform_list",
    "edit_distance",
    "feedback",
    "filter_candidates",
    "normalize",
    "validate_guess",
]
