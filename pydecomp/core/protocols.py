"""
Core protocols for PyDecomp.

These define structural interfaces that decomposition backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pydecomp.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces an algorithm-specific
    parameter payload wrapped in a Result. Backends are stateless, which
    makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder_qr', 'cpu_cholesky', 'cpu_lapack_qr'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the decomposition.

        Args:
            design: Validated input matrix

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a factorization
            ValidationError: If design is invalid for this backend
        """
        ...
