"""Pointer input: turn pygame events into one PointerFrame per tick. C clears the canvas."""

import pygame

from world.driver import PointerFrame


class PointerInput:
    """Tracks button state across frames; held stays True until the button is released."""

    def __init__(self) -> None:
        self.held = False
        self.clear_requested = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update held state; returns True if the event asks to quit."""
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return True
            if event.key == pygame.K_c:
                self.clear_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.held = True
        elif event.type == pygame.MOUSEBUTTONUP:
            self.held = False
        return False

    def poll(self) -> PointerFrame:
        quit_requested = False
        for event in pygame.event.get():
            if self.handle_event(event):
                quit_requested = True
        x, y = pygame.mouse.get_pos()
        frame = PointerFrame(held=self.held, x=x, y=y, quit=quit_requested, clear=self.clear_requested)
        self.clear_requested = False
        return frame
