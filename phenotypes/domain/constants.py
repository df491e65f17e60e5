"""Domain-level constants."""

# Largest value of the default counting type (unsigned 32-bit)
U32_MAX = 2**32 - 1

# Validation messages
NUMERATOR_GT_DENOMINATOR_MSG = "Numerator must be less than or equal to denominator!"
NOT_A_PAIR_MSG = "Expected a (numerator, denominator) pair"
INVALID_CURIE_MSG = "Expected a CURIE such as 'HP:0010442'"

# Accepted separators between prefix and id, in order of preference
CURIE_SEPARATORS = (":", "_")
