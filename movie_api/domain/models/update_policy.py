from enum import Enum


class UpdatePolicy(str, Enum):
    """How an update patch is merged into the stored movie.

    FULL overwrites every mutable field with the patch value, so fields the
    caller left out become null. SPARSE only overwrites fields the caller
    sent with a non-null value.
    """

    FULL = "full"
    SPARSE = "sparse"
