from bloom.utilities.env.display import DisplayConfiguration
from bloom.utilities.env.lsystem import LSystemConfiguration


class Configuration(
    LSystemConfiguration,
    DisplayConfiguration,
):
    """Aggregate environment configuration helpers."""
