#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Layout-settled signals.

A signal blocks until the page's layout is stable enough to read element
heights. Reading earlier captures zero or pre-reflow heights.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

LayoutSignal = Callable[[Any], None]

_NESTED_FRAMES_JS = """
(count) => new Promise((resolve) => {
  const step = (remaining) => {
    if (remaining <= 0) {
      resolve(true);
      return;
    }
    requestAnimationFrame(() => step(remaining - 1));
  };
  step(count);
})
"""

_DOCUMENT_HEIGHT_JS = "() => document.documentElement.scrollHeight"


def immediate(page: Any) -> None:
    """For renderers whose layout is complete as soon as content is set."""
    _ = page


def animation_frames(count: int = 2) -> LayoutSignal:
    frames = max(1, int(count))

    def _wait(page: Any) -> None:
        page.evaluate(_NESTED_FRAMES_JS, frames)

    return _wait


def stable_heights(interval_ms: float = 50.0, max_polls: int = 20) -> LayoutSignal:
    """Poll the document height until two consecutive reads agree."""
    polls = max(2, int(max_polls))

    def _wait(page: Any) -> None:
        previous = page.evaluate(_DOCUMENT_HEIGHT_JS)
        for _ in range(polls - 1):
            page.wait_for_timeout(interval_ms)
            current = page.evaluate(_DOCUMENT_HEIGHT_JS)
            if current == previous:
                return
            previous = current

    return _wait
