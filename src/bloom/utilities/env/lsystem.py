from bloom.utilities.env.parsing import _env_float, _env_int

DEFAULT_LSYSTEM_ITERATIONS = 4
DEFAULT_LSYSTEM_MAX_ITERATIONS = 6
DEFAULT_LSYSTEM_BRANCHES = 6
DEFAULT_GROWTH_RATE = 5.0
DEFAULT_GROWTH_RATE_MIN = 1.0
DEFAULT_GROWTH_RATE_MAX = 15.0


class LSystemConfiguration:
    @classmethod
    def lsystem_iterations(cls) -> int:
        return _env_int(
            "BLOOM_LSYSTEM_ITERATIONS",
            default=DEFAULT_LSYSTEM_ITERATIONS,
            minimum=0,
        )

    @classmethod
    def lsystem_max_iterations(cls) -> int:
        """Upper bound on rewriting passes; expansion grows combinatorially."""
        return _env_int(
            "BLOOM_LSYSTEM_MAX_ITERATIONS",
            default=DEFAULT_LSYSTEM_MAX_ITERATIONS,
            minimum=0,
        )

    @classmethod
    def lsystem_branches(cls) -> int:
        return _env_int(
            "BLOOM_LSYSTEM_BRANCHES",
            default=DEFAULT_LSYSTEM_BRANCHES,
            minimum=1,
        )

    @classmethod
    def growth_rate(cls) -> float:
        return _env_float("BLOOM_GROWTH_RATE", default=DEFAULT_GROWTH_RATE, minimum=0.0)

    @classmethod
    def growth_rate_range(cls) -> tuple[float, float]:
        minimum = _env_float(
            "BLOOM_GROWTH_RATE_MIN", default=DEFAULT_GROWTH_RATE_MIN, minimum=0.0
        )
        maximum = _env_float(
            "BLOOM_GROWTH_RATE_MAX", default=DEFAULT_GROWTH_RATE_MAX, minimum=0.0
        )
        if maximum < minimum:
            raise ValueError(
                "BLOOM_GROWTH_RATE_MAX must be greater than or equal to BLOOM_GROWTH_RATE_MIN"
            )
        return minimum, maximum
