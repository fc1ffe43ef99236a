# Tensor representations of algebra values

from .matrices import (
    basis,
    to_tensor,
    from_tensor,
    left_matrix,
    right_matrix,
    batch_multiply,
    psi_matrix
)

__all__ = [
    'basis',
    'to_tensor',
    'from_tensor',
    'left_matrix',
    'right_matrix',
    'batch_multiply',
    'psi_matrix'
]
