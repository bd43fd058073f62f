"""Split a streamed sequence of JSON objects into frames."""

from __future__ import annotations


class FrameDecoder:
    """Incremental splitter for concatenated JSON objects.

    The service writes objects back to back, pretty-printed or not, with no
    delimiter. Boundaries are found by tracking brace depth outside of string
    literals, so nested objects and braces inside strings do not end a frame.

    Non-whitespace text between objects is returned as its own frame once a
    line ends or a new object begins; it fails to parse downstream and is
    reported there.
    """

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._stray: list[str] = []
        self._depth = 0
        self._in_string = False
        self._escaped = False

    @property
    def pending(self) -> str:
        """Text of a frame that has started but not yet closed."""
        return "".join(self._buffer)

    def feed(self, text: str) -> list[str]:
        frames: list[str] = []
        for char in text:
            if self._depth == 0:
                self._feed_between(char, frames)
                continue

            self._buffer.append(char)
            if self._in_string:
                if self._escaped:
                    self._escaped = False
                elif char == "\\":
                    self._escaped = True
                elif char == '"':
                    self._in_string = False
                continue

            if char == '"':
                self._in_string = True
            elif char == "{":
                self._depth += 1
            elif char == "}":
                self._depth -= 1
                if self._depth == 0:
                    frames.append("".join(self._buffer))
                    self._buffer = []
        return frames

    def _feed_between(self, char: str, frames: list[str]) -> None:
        if char == "{":
            self._flush_stray(frames)
            self._depth = 1
            self._buffer = [char]
        elif char == "\n":
            self._flush_stray(frames)
        else:
            self._stray.append(char)

    def _flush_stray(self, frames: list[str]) -> None:
        stray = "".join(self._stray).strip()
        self._stray = []
        if stray:
            frames.append(stray)

    def flush(self) -> list[str]:
        """Return text that never formed a complete frame and reset.

        Called at end of stream, where a trailing line without a newline or
        an object that was never closed would otherwise be lost.
        """
        frames: list[str] = []
        self._flush_stray(frames)
        if self._buffer:
            frames.append(self.pending)
        self._buffer = []
        self._depth = 0
        self._in_string = False
        self._escaped = False
        return frames
