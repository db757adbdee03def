"""Thumbnail progress tracking.

The tracker is an explicitly owned object: callers create one, register the
images they are about to plan or render, tick as each one finishes and call
``done()`` when a pass is over. Nothing is kept at module level.
"""

from collections.abc import Callable

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

DEFAULT_MESSAGE = "Generating image thumbnails"


def default_progress_factory(console: Console | None = None) -> Progress:
    """Create the progress bar used for thumbnail generation.

    Args:
        console: Console to render to (Rich default if None)

    Returns:
        Progress instance showing a bar, completed/total and elapsed time
    """
    return Progress(
        TextColumn("  {task.description}"),
        BarColumn(bar_width=30, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TextColumn("{task.completed}/{task.total}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


class ThumbnailProgress:
    """Progress bar that grows as images are queued.

    Lifecycle: ``add_images`` starts the bar when nothing is pending and
    extends the total, ``tick`` advances it and ``done`` stops it and resets
    the counters. Every pass after the first completes itself once the ticks
    catch up with the pending total, which suits watch-mode rebuilds where no
    one calls ``done`` explicitly.

    Example:
        progress = ThumbnailProgress()
        progress.add_images(3)
        for image in images:
            plan(image)
            progress.tick()
        progress.done()
    """

    def __init__(
        self,
        message: str = DEFAULT_MESSAGE,
        progress_factory: Callable[[], Progress] | None = None,
    ) -> None:
        self._message = message
        self._factory = progress_factory or default_progress_factory
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._pending = 0
        self._completed = 0
        self._first_pass = True

    @property
    def pending(self) -> int:
        """Number of images registered in the current pass."""
        return self._pending

    @property
    def completed(self) -> int:
        """Number of ticks recorded in the current pass."""
        return self._completed

    @property
    def active(self) -> bool:
        """Whether a progress bar is currently running."""
        return self._progress is not None

    @property
    def auto_complete(self) -> bool:
        """Whether this pass stops itself when all pending images are ticked."""
        return not self._first_pass

    def add_images(self, count: int) -> None:
        """Register images to process, starting the bar if idle."""
        if self._progress is None:
            self._progress = self._factory()
            self._task_id = self._progress.add_task(self._message, total=0, start=False)

        if self._pending == 0:
            self._progress.start()
            self._progress.start_task(self._task_id)

        self._pending += count
        self._progress.update(self._task_id, total=self._pending)

    def tick(self, increment: int = 1) -> None:
        """Advance the bar by ``increment`` images."""
        if self._progress is None:
            return

        self._progress.advance(self._task_id, increment)
        self._completed += increment

        if self.auto_complete and self._completed == self._pending:
            self.done()

    def done(self) -> None:
        """Stop the bar and reset all counters."""
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
        self._pending = 0
        self._completed = 0
        self._first_pass = False
