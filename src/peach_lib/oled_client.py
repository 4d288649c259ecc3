"""Perform JSON-RPC calls to the ``peach-oled`` microservice."""

from __future__ import annotations

from collections.abc import Iterable

from peach_lib.client import ServiceClient
from peach_lib.config import OLED

__all__ = ["OledClient", "FONT_SIZES"]

#: Font sizes accepted by peach-oled ``write``.
FONT_SIZES = ("6x8", "6x12", "8x16", "12x16")


class OledClient(ServiceClient):
    """Client for the ``peach-oled`` display service."""

    endpoint = OLED

    def clear(self) -> str:
        """Clear the display buffer."""
        return self._call("clear", str)

    def draw(
        self,
        bitmap: Iterable[int],
        width: int,
        height: int,
        x_coord: int,
        y_coord: int,
    ) -> str:
        """Draw a 1-bit bitmap into the display buffer.

        Args:
            bitmap: Image bytes (a ``bytes`` object or any iterable of 0-255 ints)
            width: Image width in pixels
            height: Image height in pixels
            x_coord: Left edge position
            y_coord: Top edge position
        """
        return self._call(
            "draw",
            str,
            bytes=list(bitmap),
            width=width,
            height=height,
            x_coord=x_coord,
            y_coord=y_coord,
        )

    def flush(self) -> str:
        """Send the buffer to the display."""
        return self._call("flush", str)

    def ping(self) -> str:
        return self._call("ping", str)

    def power(self, on: bool) -> str:
        """Turn the display on or off."""
        return self._call("power", str, on=on)

    def write(self, x_coord: int, y_coord: int, text: str, font_size: str) -> str:
        """Write text into the display buffer.

        Args:
            x_coord: Left edge position
            y_coord: Top edge position
            text: Text to write
            font_size: One of ``FONT_SIZES``
        """
        return self._call(
            "write",
            str,
            x_coord=x_coord,
            y_coord=y_coord,
            string=text,
            font_size=font_size,
        )
