"""Common ffmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Overwrite existing files.
VIDEO_FILTER: tuple[str, ...] = ("-vf",)  #: Apply a video filter graph.
