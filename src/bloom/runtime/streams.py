from functools import cached_property
from typing import Any

import reactivex
from reactivex.subject.behaviorsubject import BehaviorSubject


class FrameStreams:
    """Subjects the game loop publishes into once per frame or event.

    ``game_tick`` carries the tick number, ``window`` the display surface,
    ``clock`` the pygame clock and ``pointer`` the latest pointer position.
    Every subject starts out holding ``None``.
    """

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def window(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def clock(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def pointer(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    def complete(self) -> None:
        for subject in (self.game_tick, self.window, self.clock, self.pointer):
            subject.on_completed()
