"""
Core math modules для bigint

Word-level алгоритмы над little-endian списками 32-битных слов.
"""

# Representation
from bigint.core.math.digits import (
    BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    SIGN_BIT,
    compare_magnitudes,
    digit_at,
    fill_word,
    from_magnitude,
    int_from_words,
    is_canonical,
    magnitude_of,
    normalize,
    shrink,
    strip_zeros,
    words_from_int,
)

# Linear arithmetic
from bigint.core.math.linear import (
    add_small,
    add_words,
    complement_words,
    div_small,
    mul_small,
    negate_words,
    subtract_words,
)

# Bitwise, shifts, comparison
from bigint.core.math.bitwise import (
    and_words,
    combine_words,
    compare_words,
    or_words,
    shift_left_words,
    shift_right_words,
    xor_words,
)

# Multiplication
from bigint.core.math.multiplication import (
    karatsuba_multiply,
    multiply_magnitudes,
    multiply_words,
    schoolbook_multiply,
)

# Division
from bigint.core.math.division import (
    divide_magnitudes,
    divide_words,
    divmod_words,
    knuth_divide,
    modulo_words,
)

__all__ = [
    # Representation: constants
    "BASE",
    "DIGIT_BITS",
    "DIGIT_MASK",
    "SIGN_BIT",
    # Representation: functions
    "compare_magnitudes",
    "digit_at",
    "fill_word",
    "from_magnitude",
    "int_from_words",
    "is_canonical",
    "magnitude_of",
    "normalize",
    "shrink",
    "strip_zeros",
    "words_from_int",
    # Linear arithmetic
    "add_small",
    "add_words",
    "complement_words",
    "div_small",
    "mul_small",
    "negate_words",
    "subtract_words",
    # Bitwise
    "and_words",
    "combine_words",
    "compare_words",
    "or_words",
    "shift_left_words",
    "shift_right_words",
    "xor_words",
    # Multiplication
    "karatsuba_multiply",
    "multiply_magnitudes",
    "multiply_words",
    "schoolbook_multiply",
    # Division
    "divide_magnitudes",
    "divide_words",
    "divmod_words",
    "knuth_divide",
    "modulo_words",
]
