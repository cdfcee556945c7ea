"""Audio stream arguments."""

DISABLE: tuple[str, ...] = ("-an",)  #: Drop every audio stream from the output.
