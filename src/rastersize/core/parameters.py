"""Shared helpers for reporting constraints a layout does not use."""

from rastersize.utils.logging import LoggingReporter, Reporter


def resolve_reporter(reporter: Reporter | None) -> Reporter:
    """Return ``reporter`` or a logging-backed default."""
    return reporter if reporter is not None else LoggingReporter()


def warn_for_ignored_parameters(
    layout: str,
    parameters: dict[str, int | None],
    source: str,
    reporter: Reporter,
) -> None:
    """Warn about supplied parameters that ``layout`` ignores.

    Args:
        layout: Human-readable layout name used in the message
        parameters: Candidate parameters; unset ones are skipped
        source: Label of the image (usually its path)
        reporter: Warning sink
    """
    ignored = [(name, value) for name, value in parameters.items() if value]
    if not ignored:
        return

    listed = ", ".join(f"{name}: {value}" for name, value in ignored)
    reporter.warn(
        f"The following provided parameter(s): {listed} for the image at {source} "
        f"are ignored in {layout} image layouts."
    )
