import logging
from typing import Callable, Optional, Sequence

from support_portal.schemas.post import Heading

logger = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 120

# Maps a heading id to its element's vertical offset, or None when not rendered
OffsetLookup = Callable[[str], Optional[float]]


class FrameThrottle:
    """
    At most one callback pending per frame. Requests made while one is
    pending are dropped, not queued.
    """

    def __init__(self):
        self._pending: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: Callable[[], None]) -> bool:
        if self._pending is not None:
            return False
        self._pending = callback
        return True

    def run_frame(self) -> bool:
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        return True


class ScrollTracker:
    """
    Tracks which table-of-contents heading is active for a scroll position.

    The article page uses it for the initially highlighted entry. The
    scroll, resize and frame hooks define the live behaviour that
    static/portal.js binds to window events and requestAnimationFrame;
    both must follow the same rules.
    """

    def __init__(
        self,
        headings: Sequence[Heading],
        lookahead: int = DEFAULT_LOOKAHEAD,
        throttle: Optional[FrameThrottle] = None,
    ):
        self.headings = list(headings)
        self.lookahead = lookahead
        self.throttle = throttle or FrameThrottle()
        self.active_id: Optional[str] = self.headings[0].id if self.headings else None

    def compute_active(self, scroll_y: float, offset_of: OffsetLookup) -> Optional[str]:
        if not self.headings:
            return None

        threshold = scroll_y + self.lookahead
        current = self.headings[0].id
        for heading in self.headings:
            top = offset_of(heading.id)
            if top is None:
                continue
            if top <= threshold:
                current = heading.id
            else:
                break
        return current

    def update(self, scroll_y: float, offset_of: OffsetLookup) -> bool:
        """Recompute the active heading; returns True when it changed."""
        current = self.compute_active(scroll_y, offset_of)
        if current is None or current == self.active_id:
            return False
        logger.debug(f"Active heading {self.active_id} -> {current}")
        self.active_id = current
        return True

    def on_scroll(self, scroll_y: float, offset_of: OffsetLookup) -> bool:
        """Schedule a recompute for the next frame; False if one is already pending."""
        return self.throttle.request(lambda: self.update(scroll_y, offset_of))

    on_resize = on_scroll

    def on_frame(self) -> bool:
        return self.throttle.run_frame()
