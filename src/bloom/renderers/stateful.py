from __future__ import annotations

from typing import Generic

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from bloom.renderers.atomic import AtomicBaseRenderer, StateT
from bloom.runtime.providers import ObservableProvider, StaticStateProvider
from bloom.runtime.streams import FrameStreams
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    """Renderer whose state is pushed in by an observable provider."""

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        state: StateT | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer takes a builder or a state, not both")
        if builder is None and state is not None:
            builder = StaticStateProvider(state)

        self.builder = builder
        self._subscription: Disposable | None = None
        super().__init__()

    def state_observable(self, streams: FrameStreams) -> Observable[StateT]:
        assert self.builder is not None
        return self.builder.observable()

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        if self.builder is not None:
            observable = self.state_observable(streams)
            self._subscription = observable.subscribe(on_next=self.set_state)
            logger.info("Subscribed %s to its state stream", self.name)
        super().initialize(window, clock, streams)

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        super().reset()
