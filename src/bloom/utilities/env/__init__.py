"""Environment configuration helpers."""

from bloom.utilities.env.config import Configuration as Configuration
from bloom.utilities.env.enums import LineRasterStrategy as LineRasterStrategy
