from functools import cached_property
from typing import Any

import pygame
import reactivex
from reactivex.subject import Subject
from reactivex.subject.behaviorsubject import BehaviorSubject


class RuntimeStreams:
    """Per-frame signals published by the game loop."""

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def events(self) -> reactivex.Subject[pygame.event.Event]:
        return Subject()
