from __future__ import annotations

from dataclasses import replace

import reactivex
from reactivex import operators as ops

from bloom.lsystem.composer import RadialComposer
from bloom.lsystem.settings import growth_rate_for_pointer
from bloom.lsystem.state import RadialBloomState
from bloom.runtime.providers import ObservableProvider
from bloom.runtime.streams import FrameStreams


class RadialBloomStateProvider(ObservableProvider[RadialBloomState]):
    def __init__(self, streams: FrameStreams, composer: RadialComposer) -> None:
        self._streams = streams
        self._composer = composer

    def window_sizes(self) -> reactivex.Observable[tuple[int, int] | None]:
        return self._streams.window.pipe(
            ops.filter(lambda window: window is not None),
            ops.map(lambda window: tuple(window.get_size())),
            ops.distinct_until_changed(),
            ops.start_with(None),
        )

    def growth_rates(
        self, window_sizes: reactivex.Observable[tuple[int, int] | None]
    ) -> reactivex.Observable[float]:
        growth_range = self._composer.settings.growth_rate_range
        return self._streams.pointer.pipe(
            ops.filter(lambda position: position is not None),
            ops.with_latest_from(window_sizes),
            ops.filter(lambda latest: latest[1] is not None),
            ops.map(
                lambda latest: growth_rate_for_pointer(
                    float(latest[0][0]), float(latest[1][0]), growth_range
                )
            ),
            ops.start_with(self._composer.settings.growth_rate),
        )

    def advance(
        self,
        state: RadialBloomState,
        *,
        size: tuple[int, int] | None,
        growth_rate: float,
    ) -> RadialBloomState:
        if size is not None:
            state = replace(state, origin=(size[0] / 2, size[1] / 2))
        if growth_rate != state.growth_rate:
            state = replace(state, growth_rate=growth_rate)
        return self._composer.advance(state)

    def observable(self) -> reactivex.Observable[RadialBloomState]:
        window_sizes = self.window_sizes()
        growth_rates = self.growth_rates(window_sizes)
        initial_state = self._composer.state

        def advance(state: RadialBloomState, latest) -> RadialBloomState:
            _tick, size, growth_rate = latest
            return self.advance(state, size=size, growth_rate=growth_rate)

        return self._streams.game_tick.pipe(
            ops.filter(lambda tick: tick is not None),
            ops.with_latest_from(window_sizes, growth_rates),
            ops.scan(advance, seed=initial_state),
            ops.start_with(initial_state),
            ops.share(),
        )
