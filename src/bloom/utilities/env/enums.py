from enum import StrEnum


class LineRasterStrategy(StrEnum):
    PIL = "pil"
    PYGAME = "pygame"
