"""
settings.py

Constants shared across huffcodec.
"""


ZERO_BIT = "0"
ONE_BIT = "1"

# Code given to the only symbol of a one-symbol alphabet.
SINGLE_SYMBOL_CODE = ZERO_BIT

# Bits per symbol of the fixed-width baseline used for compression ratios.
FIXED_SYMBOL_WIDTH = 8
