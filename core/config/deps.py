"""
Settings injection for the cross-reference tool.

core.config exposes each app_config.yaml section as an alias of the form
Annotated[Section, Depends(getter)]:

    AppSettings     dataset file names and the output workbook prefix
    SearchSettings  fuzzy matching floor, max results and suggestions
    BatchSettings   batch cap, chunk size and progress bar

inject(alias) calls the getter, which loads the YAML on first use:

    from core.config import BatchSettings, inject

    batch_cfg = inject(BatchSettings)
    rows = read_query_file(path, batch_cfg.max_batch_size)
"""

from __future__ import annotations

from typing import Annotated, Callable, get_args, get_origin


class Depends:
    """Marks the getter that returns one settings section."""

    __slots__ = ("getter",)

    def __init__(self, getter: Callable[[], object]) -> None:
        self.getter = getter


def inject(typed: type) -> object:
    """
    Return the settings section behind a core.config alias.
    Raises TypeError for anything that is not Annotated with a Depends marker.
    """
    if get_origin(typed) is not Annotated:
        raise TypeError(f"Expected a settings alias such as SearchSettings, got: {typed}")
    _, *markers = get_args(typed)
    for meta in markers:
        if isinstance(meta, Depends):
            return meta.getter()
    raise TypeError(f"{typed} carries no Depends marker, so no settings section to load")
