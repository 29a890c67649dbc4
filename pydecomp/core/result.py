"""
Generic result container for all PyDecomp computations.

The Result class provides a standardized envelope that every decomposition
backend returns. This enables shared tooling for timing, diagnostics and
reproducibility while allowing each algorithm to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, shape, reflections)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every result unless overridden."""
    import scipy
    from pydecomp import __version__

    return {
        'pydecomp_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix decompositions.

    Type Parameters:
        P: The algorithm-specific parameter payload type

    Attributes:
        params: Algorithm-specific payload (Q and R, L and Lᵀ, ...)
        info: Structured metadata (method, shape, steps taken)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions and algorithm used to produce the result

    Examples:
        >>> Result(
        ...     params=QRParams(Q=Q, R=R, rank=3),
        ...     info={'method': 'householder', 'reflections': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_householder_qr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
