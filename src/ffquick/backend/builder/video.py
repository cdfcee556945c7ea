"""Video filter argument helpers."""

from ffquick.models.options import (
    DEFAULT_GIF_FPS,
    DEFAULT_GIF_SCALE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GifOptions,
    ResolutionOptions,
)

from .command_args import VIDEO_FILTER

HALF_SCALE = "scale=iw/2:ih/2"  #: Halve both dimensions of the input frame.
GIF_FLAGS: tuple[str, ...] = ("-gifflags", "+transdiff")  #: Store only changed pixels between GIF frames.


def half() -> tuple[str, ...]:
    """Return a filter that halves the input resolution."""
    return (*VIDEO_FILTER, HALF_SCALE)


def scale(opts: ResolutionOptions) -> tuple[str, ...]:
    """Return a filter scaling to the requested width and height."""
    width = opts.width or DEFAULT_WIDTH
    height = opts.height or DEFAULT_HEIGHT
    return (*VIDEO_FILTER, f"scale={width}:{height}")


def gif(opts: GifOptions) -> tuple[str, ...]:
    """Return the frame rate and scale filter plus GIF muxer flags.

    Height is derived from the aspect ratio (``-1``).
    """
    fps = opts.fps or DEFAULT_GIF_FPS
    width = opts.scale or DEFAULT_GIF_SCALE
    return (*VIDEO_FILTER, f"fps={fps},scale={width}:-1", *GIF_FLAGS)
