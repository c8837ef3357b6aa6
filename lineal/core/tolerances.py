"""
Numerical thresholds.

The elimination routines compare against exact zero on purpose; the only
tolerance used by the library itself is the zero-row threshold of rank().
The tiers below document the agreement expected between the independent
algorithms (cofactor vs. elimination) and are shared with the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# A row of a reduced matrix counts as zero when every |entry| is below this
RANK_ZERO_THRESHOLD = 1e-12

# determinant() vs determinant_c() on non-singular input
DETERMINANT_AGREEMENT = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='determinant_agreement',
    description='Laplace expansion vs. row-reduction diagonal product',
)

# Per-entry distance of M * M^-1 from the identity
INVERSE_IDENTITY = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='inverse_identity',
    description='Adjugate and Gauss-Jordan inverses times the original',
)
