# utils.py

import re

import config

_SEPARATORS = re.compile(r"[,;\s]+")


def parse_reference_string(text):
    """Split free-form text like '7, 0 1;2' into page ids (ints where possible)."""
    pages = []
    for token in _SEPARATORS.split(text or ""):
        if token == "":
            continue
        try:
            pages.append(int(token))
        except ValueError:
            pages.append(token)
    return pages


def get_color(step, slot=None):
    """Return a color for a step, or for one frame of that step's snapshot."""
    if step is None:
        return config.EMPTY_COLOR
    if slot is None:
        return config.FAULT_COLOR if step.fault else config.HIT_COLOR
    if slot >= len(step.frames):
        return config.EMPTY_COLOR
    if step.hit:
        return config.HIT_COLOR if step.frames[slot] == step.page else config.RESIDENT_COLOR
    if slot != step.slot:
        return config.RESIDENT_COLOR
    # the frame that was just written
    return config.EVICT_COLOR if step.evicted else config.FAULT_COLOR


def frame_table(result):
    """
    Build the textbook frame-by-step grid.

    Returns one row per frame, each row holding the page in that frame after
    every step (None while the frame is still empty).
    """
    rows = [[] for _ in range(result.capacity)]
    for step in result.steps:
        for slot in range(result.capacity):
            rows[slot].append(step.frames[slot] if slot < len(step.frames) else None)
    return rows
