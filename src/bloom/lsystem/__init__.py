from bloom.lsystem.composer import RadialComposer  # noqa: F401
from bloom.lsystem.grammar import (ExpandedSequence, Grammar,  # noqa: F401
                                   TurtleCommand, expand)
from bloom.lsystem.provider import RadialBloomStateProvider  # noqa: F401
from bloom.lsystem.renderer import RadialBloomRenderer  # noqa: F401
from bloom.lsystem.settings import RadialBloomSettings  # noqa: F401
from bloom.lsystem.state import BranchState, RadialBloomState  # noqa: F401
