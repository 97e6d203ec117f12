"""
Custom exceptions for the red-black tree.
"""


class InvalidTreeError(Exception):
    """
    Raised by validate() when a tree breaks one or more red-black invariants.

    Only hand-built trees can trigger this; every tree produced by the
    public constructors and mutators is valid.
    """

    def __init__(self, violations: list[str]):
        """
        Initialize the error.

        Args:
            violations: One human-readable message per failed check.
        """
        self.violations = violations
        super().__init__(
            f"Invalid red-black tree ({len(violations)} violation(s)): "
            + "; ".join(violations)
        )
