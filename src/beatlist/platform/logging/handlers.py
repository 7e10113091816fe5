"""Rich console handler rendering structured conversion events."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_SEPARATOR_STYLE = Style(color="magenta")
_SEGMENT_STYLE = Style(color="white")


def _int_extra(record: logging.LogRecord, name: str) -> int | None:
    value = getattr(record, name, None)
    return value if isinstance(value, int) and not isinstance(value, bool) else None


class ConversionRichHandler(RichHandler):
    """RichHandler for records logged with a ``conversion_event`` extra.

    File events render as ``[n/total] Verb path`` with the long paths cut to
    their last few segments; batch events render as a one-line tally. Other
    records go through the stock RichHandler rendering.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "conversion.batch.start": ("🚀", "cyan"),
        "conversion.batch.complete": ("✅", "green"),
        "conversion.batch.no_files": ("ℹ️", "yellow"),
        "conversion.file.start": ("🎧", "blue"),
        "conversion.file.success": ("🎉", "green"),
        "conversion.file.error": ("⛔", "red"),
        "conversion.file.delete": ("🗑️", "magenta"),
        "validation.file.success": ("✅", "green"),
        "validation.file.error": ("⛔", "red"),
    }
    _FILE_VERBS: ClassVar[dict[str, str]] = {
        "conversion.file.start": "Converting",
        "conversion.file.success": "Converted",
        "conversion.file.error": "Failed",
        "conversion.file.delete": "Deleted",
        "validation.file.success": "Valid",
        "validation.file.error": "Invalid",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=True,
        )
        super().__init__(*args, **kwargs)

    def _format_path(self, raw_path: str) -> Text:
        """Colour separators and keep only the last ``_PATH_SEGMENT_LIMIT`` segments."""

        pure: PurePath = PureWindowsPath(raw_path) if "\\" in raw_path else PurePosixPath(raw_path)
        separator = "\\" if isinstance(pure, PureWindowsPath) else "/"
        segments = [part for part in pure.parts if part and part != pure.anchor]

        if len(segments) > self._PATH_SEGMENT_LIMIT:
            lead = "…"
            segments = segments[-self._PATH_SEGMENT_LIMIT :]
        else:
            lead = pure.anchor.rstrip("\\/")

        text = Text()
        if pure.anchor or lead:
            _ = text.append(lead, style=_SEGMENT_STYLE if lead != "…" else _SEPARATOR_STYLE)
            _ = text.append(separator, style=_SEPARATOR_STYLE)
        for index, segment in enumerate(segments or ["."]):
            if index:
                _ = text.append(separator, style=_SEPARATOR_STYLE)
            _ = text.append(segment, style=_SEGMENT_STYLE)
        return text

    def _batch_body(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        if event == "conversion.batch.start":
            _ = body.append("Batch start")
            total = _int_extra(record, "total_files")
            if total is not None:
                _ = body.append(f" [total={total}]")
        elif event == "conversion.batch.complete":
            counts = {name: _int_extra(record, name) for name in ("succeeded", "failed")}
            tally = [f"{name}={count}" for name, count in counts.items() if count is not None]
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                tally.append(f"duration={duration:.2f}s")
            _ = body.append("Batch complete")
            if tally:
                _ = body.append(f" [{', '.join(tally)}]")
        else:
            _ = body.append("No matching files")

        pattern = getattr(record, "pattern", None)
        if pattern:
            _ = body.append(f" @ {pattern}")
        return body

    def _file_body(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        sequence = _int_extra(record, "sequence")
        total = _int_extra(record, "total_files")
        if sequence:
            _ = body.append(f"[{sequence}/{total}] " if total else f"[{sequence}] ")

        verb = self._FILE_VERBS.get(event)
        if verb:
            _ = body.append(f"{verb} ")

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        succeeded = event == "conversion.file.success"
        target_path = getattr(record, "target_path", None)
        if succeeded and target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        note: str | None = None
        duration_ms = getattr(record, "duration_ms", None)
        error_message = getattr(record, "error_message", None)
        if succeeded and isinstance(duration_ms, (int, float)):
            note = f"{duration_ms:.2f} ms"
        elif event.endswith(".error") and error_message:
            note = str(error_message)
        if note:
            _ = body.append(f" ({note})")
        return body

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "conversion_event", None)
        if not isinstance(event, str):
            return super().render_message(record, message)

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        body = (
            self._batch_body(event, record)
            if event.startswith("conversion.batch")
            else self._file_body(event, record)
        )
        body.style = Style(color=color)

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append_text(body)
        return text


__all__ = ["ConversionRichHandler"]
