"""
Core inversive congruential generator functionality.
"""

from .icg_prng import ICGPRNG, BOX_MULLER_EPS
from .modular import is_prime, modular_inverse
from .errors import ICGError, InvalidGeneratorError, NormalSamplingError
from .sampling import SampleSummary, draw_raw, draw_uniform, draw_normal, summarize, find_period

__all__ = ['ICGPRNG', 'BOX_MULLER_EPS', 'is_prime', 'modular_inverse',
           'ICGError', 'InvalidGeneratorError', 'NormalSamplingError',
           'SampleSummary', 'draw_raw', 'draw_uniform', 'draw_normal', 'summarize', 'find_period']
