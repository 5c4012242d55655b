"""
Calculator settings.
"""

from dataclasses import dataclass

import numpy as np

SUPPORTED_INT_BITS = (8, 16, 32, 64)


@dataclass
class CalcConfig:
    """
    Settings for a calculator session.

    Attributes:
        int_bits: Width of the signed integer domain results must fit in
        prompt: Written before each statement is read
        result_format: Format for a successful result; receives {value}
        abort_on_error: Stop the session at the first error instead of
            skipping to the next statement
    """

    int_bits: int = 32
    prompt: str = "Calc> "
    result_format: str = "=> {value}"
    abort_on_error: bool = False

    def __post_init__(self) -> None:
        if self.int_bits not in SUPPORTED_INT_BITS:
            raise ValueError(
                f"int_bits must be one of {SUPPORTED_INT_BITS}, got {self.int_bits}"
            )

    @property
    def int_limits(self) -> tuple[int, int]:
        """Inclusive (min, max) of the integer domain."""
        info = np.iinfo(f"int{self.int_bits}")
        return int(info.min), int(info.max)
