"""
Matrix representations of algebra values as torch tensors.

The regular representations turn multiplication into matrix products:
    left_matrix(x) @ to_tensor(y)  == to_tensor(x * y)
    right_matrix(y) @ to_tensor(x) == to_tensor(x * y)
Entries are float64, so these are for numerical checks and batch work,
not for exact arithmetic.
"""

import torch

from ..core.rank1 import Complex
from ..core.rank2 import Rank2Number

DTYPE = torch.float64


def select_device(device: torch.device | str | None = None) -> torch.device:
    """Default to CPU; float64 is not available on every accelerator."""
    if device is not None:
        return torch.device(device)
    return torch.device("cpu")


def basis(cls):
    """Standard basis 1, U1, U2, ... of an algebra."""
    components = [0] * cls.DIMENSION
    elements = []
    for index in range(cls.DIMENSION):
        components[index] = 1
        elements.append(cls(*components))
        components[index] = 0
    return elements


def to_tensor(x, device=None) -> torch.Tensor:
    """Components of x as a float64 vector."""
    return torch.tensor([float(c) for c in x.cartesian()], dtype=DTYPE, device=select_device(device))


def from_tensor(cls, t):
    """Build a cls value from a vector of DIMENSION components."""
    if t.shape[-1] != cls.DIMENSION:
        raise ValueError(f"{cls.__name__} needs {cls.DIMENSION} components, got {t.shape[-1]}")
    return cls(*[float(v) for v in t.tolist()])


def left_matrix(x, device=None):
    """Matrix of y -> x * y; column j is x times the j-th basis element."""
    columns = [to_tensor(x * e, device) for e in basis(type(x))]
    return torch.stack(columns, dim=-1)


def right_matrix(y, device=None):
    """Matrix of x -> x * y; column j is the j-th basis element times y."""
    columns = [to_tensor(e * y, device) for e in basis(type(y))]
    return torch.stack(columns, dim=-1)


def batch_multiply(xs, ys, device=None):
    """
    Multiply two equal-length sequences of values through their left matrices.

    Returns:
        torch.Tensor: [batch, DIMENSION] products
    """
    if len(xs) != len(ys):
        raise ValueError(f"length mismatch: {len(xs)} vs {len(ys)}")
    L = torch.stack([left_matrix(x, device) for x in xs])
    v = torch.stack([to_tensor(y, device) for y in ys])
    return torch.einsum("bij,bj->bi", L, v)


def psi_matrix(x, device=None) -> torch.Tensor:
    """
    Complex 2x2 matrix [[A, B], [TWIST*conj(B), conj(A)]] of a doubled value.

    Only defined over the Complex base. The determinant equals quad(x) and
    psi_matrix(x) @ psi_matrix(y) == psi_matrix(x * y).
    """
    if not isinstance(x, Rank2Number) or type(x).BASE is not Complex:
        raise TypeError(f"psi_matrix needs a doubling of Complex, got {type(x).__name__}")
    a0, a1, b0, b1 = [float(c) for c in x.cartesian()]
    z_a = complex(a0, a1)
    z_b = complex(b0, b1)
    psi = torch.zeros((2, 2), dtype=torch.complex128, device=select_device(device))
    psi[0, 0] = z_a
    psi[0, 1] = z_b
    psi[1, 0] = type(x).TWIST * z_b.conjugate()
    psi[1, 1] = z_a.conjugate()
    return psi
