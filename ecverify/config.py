"""
Library Configuration
=====================

Runtime options read from the environment.

Curve parameters are NOT configurable; they live in ``ecverify.groups``.
"""

import os


DEFAULT_INTEGER_BITS = int(os.getenv('ECVERIFY_INTEGER_BITS', 256))

# Disable only when every point reaching ec_add / ec_mul is already trusted
DEFAULT_VALIDATE_POINTS = os.getenv('ECVERIFY_VALIDATE_POINTS', 'true').lower() == 'true'


class Config:
    """Configuration values"""

    def __init__(self):
        self.integer_bits = DEFAULT_INTEGER_BITS
        self.validate_points = DEFAULT_VALIDATE_POINTS

    @property
    def integer_limit(self):
        return 1 << self.integer_bits


# Global configuration instance
config = Config()
