from __future__ import annotations

from typing import Generic

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from pookalam.renderers.atomic import AtomicBaseRenderer, StateT
from pookalam.runtime.providers import ObservableProvider
from pookalam.runtime.streams import RuntimeStreams
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    """Renderer whose state is the latest value of a provider's observable."""

    def __init__(
        self,
        builder: ObservableProvider[StateT],
        *args,
        **kwargs,
    ) -> None:
        self.builder = builder
        self._subscription: Disposable | None = None
        super().__init__(*args, **kwargs)

    def state_observable(self, streams: RuntimeStreams) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: RuntimeStreams,
    ) -> None:
        logger.info("Subscribing %s to its state provider", self.name)
        observable = self.state_observable(streams=streams)
        self._subscription = observable.subscribe(on_next=self.set_state)
        if self.warmup:
            self.process(window, clock)
        self.initialized = True

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        super().reset()
