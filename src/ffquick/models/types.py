"""Operation type definitions."""

from __future__ import annotations

from enum import Enum

from ffquick.errors import UnknownOperationError

LEGACY_PREFIX = "-"  #: Operations were historically selected as ``-<name>``.


class Operation(str, Enum):
    """Media operations that map onto a single ffmpeg invocation."""

    HALF_RESOLUTION = "half_resolution"
    STRIP_AUDIO = "strip_audio"
    RE_ENCODE = "re_encode"
    TRIM = "trim"
    SPECIFY_RESOLUTION = "specify_resolution"
    CONVERT_TO_GIF = "convert_to_gif"
    CHANGE_FILE_TYPE = "change_file_type"

    @property
    def description(self) -> str:
        """One-line description shown in usage and help output."""
        return OPERATION_DESCRIPTIONS[self]

    @property
    def selector(self) -> str:
        """Command-line selector in its historical dashed form."""
        return f"{LEGACY_PREFIX}{self.value}"

    @classmethod
    def from_selector(cls, selector: str) -> Operation:
        """Return the operation named by ``selector``.

        Both the dashed form (``-trim``) and the bare form (``trim``) match;
        anything else raises :class:`UnknownOperationError`.
        """
        name = selector[len(LEGACY_PREFIX) :] if selector.startswith(LEGACY_PREFIX) else selector
        try:
            return cls(name)
        except ValueError:
            raise UnknownOperationError(selector) from None


OPERATION_DESCRIPTIONS: dict[Operation, str] = {
    Operation.HALF_RESOLUTION: "Re-encode video to mp4 and half the resolution.",
    Operation.STRIP_AUDIO: "Strip audio",
    Operation.RE_ENCODE: "Re encode the video to mp4",
    Operation.TRIM: "Trim the video to a start and end time",
    Operation.SPECIFY_RESOLUTION: "Specify the width and height",
    Operation.CONVERT_TO_GIF: "Make a gif specifying the scale and fps",
    Operation.CHANGE_FILE_TYPE: "Change video type ex from .mp4 to .mov",
}


__all__ = ["OPERATION_DESCRIPTIONS", "Operation"]
