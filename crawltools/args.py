"""Argument containers used to initialize the crawler scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .crawlerrors import gen_error


@dataclass
class RequestArgs:
    """Request-related arguments.

    ``accepted_domains`` lists the primary domains whose URLs are accepted;
    requests deeper than ``max_depth`` are ignored.
    """

    accepted_domains: Optional[List[str]] = None
    max_depth: int = 0

    def check(self) -> None:
        """Raise SchedulerError if the arguments are invalid."""
        if self.accepted_domains is None:
            raise gen_error("nil accepted primary domain list")

    def same(self, another: Optional["RequestArgs"]) -> bool:
        """Tell whether another container holds the same arguments."""
        if another is None:
            return False
        if another.max_depth != self.max_depth:
            return False
        return list(another.accepted_domains or []) == list(
            self.accepted_domains or []
        )


@dataclass
class DataArgs:
    """Capacities and maximum buffer numbers of the scheduler's buffer pools."""

    req_buffer_cap: int = 0
    req_max_buffer_number: int = 0
    resp_buffer_cap: int = 0
    resp_max_buffer_number: int = 0
    item_buffer_cap: int = 0
    item_max_buffer_number: int = 0
    error_buffer_cap: int = 0
    error_max_buffer_number: int = 0

    def check(self) -> None:
        """Raise SchedulerError for the first zero value found."""
        checks = (
            (self.req_buffer_cap, "zero request buffer capacity"),
            (self.req_max_buffer_number, "zero max request buffer number"),
            (self.resp_buffer_cap, "zero response buffer capacity"),
            (self.resp_max_buffer_number, "zero max response buffer number"),
            (self.item_buffer_cap, "zero item buffer capacity"),
            (self.item_max_buffer_number, "zero max item buffer number"),
            (self.error_buffer_cap, "zero error buffer capacity"),
            (self.error_max_buffer_number, "zero max error buffer number"),
        )
        for value, message in checks:
            if value == 0:
                raise gen_error(message)


@dataclass(frozen=True)
class ModuleArgsSummary:
    """Sizes of the module lists of a ModuleArgs."""

    downloader_list_size: int
    analyzer_list_size: int
    pipeline_list_size: int


@dataclass
class ModuleArgs:
    """Lists of downloaders, analyzers and item pipelines."""

    downloaders: List[Any] = field(default_factory=list)
    analyzers: List[Any] = field(default_factory=list)
    pipelines: List[Any] = field(default_factory=list)

    def check(self) -> None:
        """Raise SchedulerError if any module list is empty."""
        if not self.downloaders:
            raise gen_error("empty downloader list")
        if not self.analyzers:
            raise gen_error("empty analyzer list")
        if not self.pipelines:
            raise gen_error("empty pipeline list")

    def summary(self) -> ModuleArgsSummary:
        """Return the sizes of the module lists."""
        return ModuleArgsSummary(
            downloader_list_size=len(self.downloaders),
            analyzer_list_size=len(self.analyzers),
            pipeline_list_size=len(self.pipelines),
        )