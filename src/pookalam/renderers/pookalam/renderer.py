from __future__ import annotations

import pygame
import reactivex
from reactivex.disposable import Disposable

from pookalam.assets.loader import Loader
from pookalam.renderers import StatefulBaseRenderer
from pookalam.renderers.pookalam.controls import PookalamControls
from pookalam.renderers.pookalam.provider import PookalamStateProvider
from pookalam.renderers.pookalam.render import build_draw_commands, execute
from pookalam.renderers.pookalam.state import PookalamState
from pookalam.runtime.streams import RuntimeStreams


class PookalamScene(StatefulBaseRenderer[PookalamState]):
    def __init__(
        self,
        provider: PookalamStateProvider,
        controls: PookalamControls,
        *,
        marker: pygame.Surface | None = None,
    ) -> None:
        self.provider = provider
        self.controls = controls
        self.marker = marker
        self._font: pygame.font.Font | None = None
        self._event_subscription: Disposable | None = None
        super().__init__(builder=self.provider)

    def state_observable(
        self, streams: RuntimeStreams
    ) -> reactivex.Observable[PookalamState]:
        self._event_subscription = streams.events.subscribe(
            on_next=self.controls.handle_event
        )
        return self.provider.observable()

    def real_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        if self._font is None:
            self._font = Loader.load_font()
        self.controls.resize(window.get_size())
        state = self.state
        commands = build_draw_commands(
            state.sequence,
            state.animation,
            self.controls.view,
            self.controls.viewport,
            self.controls.options,
            marker_available=self.marker is not None,
        )
        execute(window, commands, marker=self.marker, font=self._font)

    def reset(self) -> None:
        if self._event_subscription is not None:
            self._event_subscription.dispose()
            self._event_subscription = None
        super().reset()
