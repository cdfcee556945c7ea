"""Time range argument helpers."""

from ffquick.models.options import TimeOptions

START: tuple[str, ...] = ("-ss",)  #: Start timestamp of the output.
END: tuple[str, ...] = ("-to",)  #: End timestamp of the output.


def basic(opts: TimeOptions) -> tuple[str, ...]:
    """Return ``-ss``/``-to`` args, omitting whichever bound is unset."""
    args: list[str] = []
    if opts.start:
        args += [*START, opts.start]
    if opts.end:
        args += [*END, opts.end]
    return tuple(args)
