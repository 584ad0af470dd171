"""
freqsignal - analog frequency-response signal math.

Subpackages:
- core: level conversion, phase cleanup, band numbers, octave ranges,
  displayable frequency range
- utils: formatting and parsing of frequencies and levels
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
