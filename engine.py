# engine.py
"""
Page replacement simulation engine.

Runs a reference string through a fixed number of frames under one of the
classic replacement policies (FIFO, LRU, Optimal) and records, for every
access, whether it hit or faulted, which frame was written, which page was
evicted and what the frames held afterwards.

The engine is pure: each call to ``simulate`` builds its own bookkeeping and
returns an immutable ``SimulationResult`` that can be replayed forwards or
backwards without recomputation.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Sequence, Tuple


# =============================================================================
# ERRORS
# =============================================================================

class SimulationError(ValueError):
    """Base class for rejected simulation requests."""


class InvalidCapacity(SimulationError):
    """Raised when the frame count is not a positive integer."""

    def __init__(self, capacity):
        super().__init__(f"Frame count must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class UnknownAlgorithm(SimulationError):
    """Raised when the algorithm selector is not one of fifo, lru, optimal."""

    def __init__(self, algorithm):
        super().__init__(
            f"Unknown replacement algorithm {algorithm!r} "
            f"(expected one of: {', '.join(ReplacementPolicy.ALL)})"
        )
        self.algorithm = algorithm


# =============================================================================
# DATA MODEL
# =============================================================================

class ReplacementPolicy:
    """
    Enumeration of available page replacement algorithms.

    FIFO:    First-In-First-Out - replaces the page resident the longest
    LRU:     Least Recently Used - replaces the page not used for longest time
    OPTIMAL: Belady's optimal - replaces the page used furthest in the future
    """
    FIFO = "fifo"
    LRU = "lru"
    OPTIMAL = "optimal"

    ALL = (FIFO, LRU, OPTIMAL)

    LABELS = {
        FIFO: "FIFO",
        LRU: "LRU",
        OPTIMAL: "Optimal",
    }

    @classmethod
    def normalize(cls, algorithm) -> str:
        """
        Map a selector such as ``"LRU"`` or ``" fifo "`` onto a policy name.

        Raises:
            UnknownAlgorithm: If the selector is outside the closed set
        """
        if isinstance(algorithm, str):
            key = algorithm.strip().lower()
            if key in cls.ALL:
                return key
        raise UnknownAlgorithm(algorithm)


@dataclass(frozen=True)
class StepRecord:
    """
    Outcome of a single page access.

    Attributes:
        index (int): Position of the access in the reference string
        page: The accessed page identifier
        frames (Tuple): Frame contents after the access, in slot order
        hit (bool): True if the page was resident before the access
        slot (Optional[int]): Frame written on a fault, None on a hit
        evicted_slot (Optional[int]): Frame whose page was replaced, None if
            a free frame was used or the access hit
        evicted_page: The page that was replaced, None if nothing was evicted
        note (str): Human-readable description of what happened
    """
    index: int
    page: Hashable
    frames: Tuple
    hit: bool
    slot: Optional[int] = None
    evicted_slot: Optional[int] = None
    evicted_page: Optional[Hashable] = None
    note: str = ""

    @property
    def fault(self) -> bool:
        return not self.hit

    @property
    def evicted(self) -> bool:
        return self.evicted_slot is not None


@dataclass(frozen=True)
class SimulationResult:
    """
    Complete step history of one simulation run.

    Attributes:
        algorithm (str): Policy used (one of ReplacementPolicy.ALL)
        capacity (int): Number of frames
        pages (Tuple): The reference string
        steps (Tuple[StepRecord, ...]): One record per access
        total_faults (int): Number of faulting accesses
        total_hits (int): Number of hitting accesses
    """
    algorithm: str
    capacity: int
    pages: Tuple
    steps: Tuple[StepRecord, ...]
    total_faults: int
    total_hits: int

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def total_evictions(self) -> int:
        return sum(1 for s in self.steps if s.evicted)

    def events(self) -> List[str]:
        """Return the per-step notes in access order."""
        return [s.note for s in self.steps]

    def stats(self) -> Dict[str, float]:
        """
        Calculate and return simulation statistics.

        Returns:
            Dict[str, float]: Statistics including:
                - hits: Total page hits
                - faults: Total page faults
                - hit_ratio: Hits / Total accesses
                - fault_rate: Faults / Total accesses
                - total_refs: Total memory references
        """
        total_refs = self.total_hits + self.total_faults
        hit_ratio = (self.total_hits / total_refs) if total_refs > 0 else 0.0
        fault_rate = (self.total_faults / total_refs) if total_refs > 0 else 0.0

        return {
            "hits": self.total_hits,
            "faults": self.total_faults,
            "hit_ratio": round(hit_ratio, 4),
            "fault_rate": round(fault_rate, 4),
            "total_refs": total_refs,
        }


# Reference string exhibiting Belady's anomaly under FIFO (3 vs 4 frames)
BELADY_SEQUENCE = (1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5)


# =============================================================================
# SIMULATOR
# =============================================================================

class _ReplacementRun:
    """
    Bookkeeping for a single simulation run.

    Frames are kept in slot order for display; the policy state lives in
    separate maps so in-place replacement never disturbs arrival order.

    Attributes:
        pages (Tuple): The reference string
        capacity (int): Number of frames
        policy (str): Active replacement policy
        frames (List): Resident page per slot
        slot_of (Dict): Maps resident page -> slot
        arrivals (deque): Resident pages in load order (FIFO)
        last_used (Dict): Maps resident page -> index of its latest access
        next_use (List[int]): For each position, the next position holding
            the same page, or len(pages) if it never reappears (Optimal)
    """

    def __init__(self, pages: Tuple, capacity: int, policy: str):
        self.pages = pages
        self.capacity = capacity
        self.policy = policy

        self.frames: List = []
        self.slot_of: Dict = {}
        self.arrivals: deque = deque()
        self.last_used: Dict = {}

        self.next_use: List[int] = []
        if policy == ReplacementPolicy.OPTIMAL:
            self.next_use = _next_occurrences(pages)

    def run(self) -> List[StepRecord]:
        return [self.access_page(i) for i in range(len(self.pages))]

    def access_page(self, i: int) -> StepRecord:
        """
        Process the access at position ``i``.

        Returns:
            StepRecord: Hit/fault outcome with the frames after the access
        """
        page = self.pages[i]

        # ----- PAGE HIT -----
        if page in self.slot_of:
            slot = self.slot_of[page]
            self.last_used[page] = i
            return StepRecord(
                index=i,
                page=page,
                frames=tuple(self.frames),
                hit=True,
                note=f"Hit: Page {page} in Frame {slot}",
            )

        # ----- PAGE FAULT -----
        if len(self.frames) < self.capacity:
            slot = len(self.frames)
            self.frames.append(page)
            self._load_page_into_frame(page, slot, i)
            return StepRecord(
                index=i,
                page=page,
                frames=tuple(self.frames),
                hit=False,
                slot=slot,
                note=f"Fault: Loaded: Page {page} -> Frame {slot}",
            )

        victim_slot = self._select_victim(i)
        evicted_page = self.frames[victim_slot]
        self._evict(evicted_page)
        self.frames[victim_slot] = page
        self._load_page_into_frame(page, victim_slot, i)
        return StepRecord(
            index=i,
            page=page,
            frames=tuple(self.frames),
            hit=False,
            slot=victim_slot,
            evicted_slot=victim_slot,
            evicted_page=evicted_page,
            note=(
                f"Fault: Evicting: Page {evicted_page} from Frame {victim_slot}, "
                f"Loaded: Page {page} -> Frame {victim_slot} (replaced)"
            ),
        )

    def _load_page_into_frame(self, page, slot: int, i: int):
        self.slot_of[page] = slot
        self.last_used[page] = i
        self.arrivals.append(page)

    def _evict(self, page):
        del self.slot_of[page]
        del self.last_used[page]
        self.arrivals.remove(page)

    def _select_victim(self, i: int) -> int:
        """
        Choose the slot to replace when all frames are occupied.

        - FIFO: page at the front of the arrival queue
        - LRU: smallest last-use index, first in slot order on ties
        - OPTIMAL: largest next-use index, scanning in slot order; among pages
          that never reappear the last one scanned wins

        Returns:
            int: Slot index of the victim
        """
        if self.policy == ReplacementPolicy.FIFO:
            return self.slot_of[self.arrivals[0]]

        if self.policy == ReplacementPolicy.LRU:
            victim_slot = 0
            min_time = float('inf')
            for slot, p in enumerate(self.frames):
                if self.last_used[p] < min_time:
                    min_time = self.last_used[p]
                    victim_slot = slot
            return victim_slot

        # Resident pages were last touched before i and not since, so the
        # next occurrence after their last use is also the next one after i.
        never = len(self.pages)
        victim_slot = 0
        max_dist = -1
        for slot, p in enumerate(self.frames):
            dist = self.next_use[self.last_used[p]]
            if dist > max_dist or (dist == never and max_dist == never):
                max_dist = dist
                victim_slot = slot
        return victim_slot


def _next_occurrences(pages: Sequence) -> List[int]:
    """For each position, the next position of the same page (len if none)."""
    never = len(pages)
    result = [never] * len(pages)
    seen: Dict = {}
    for i in range(len(pages) - 1, -1, -1):
        result[i] = seen.get(pages[i], never)
        seen[pages[i]] = i
    return result


def _check_capacity(capacity) -> int:
    # bool is an int subclass but never a meaningful frame count
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise InvalidCapacity(capacity)
    return capacity


def simulate(pages: Sequence, capacity: int, algorithm) -> SimulationResult:
    """
    Run a reference string through ``capacity`` frames.

    Args:
        pages (Sequence): Page identifiers in access order (hashable)
        capacity (int): Number of frames, at least 1
        algorithm (str): One of 'fifo', 'lru', 'optimal' (case-insensitive)

    Returns:
        SimulationResult: Step history plus fault and hit totals

    Raises:
        InvalidCapacity: If capacity is not a positive integer
        UnknownAlgorithm: If algorithm is not a recognised policy
    """
    capacity = _check_capacity(capacity)
    policy = ReplacementPolicy.normalize(algorithm)
    pages = tuple(pages)

    steps = tuple(_ReplacementRun(pages, capacity, policy).run())
    hits = sum(1 for s in steps if s.hit)

    return SimulationResult(
        algorithm=policy,
        capacity=capacity,
        pages=pages,
        steps=steps,
        total_faults=len(steps) - hits,
        total_hits=hits,
    )


def compare(pages: Sequence, capacity: int) -> Dict[str, SimulationResult]:
    """
    Simulate every policy on the same input.

    Returns:
        Dict[str, SimulationResult]: Results keyed by policy, in the order
        FIFO, LRU, Optimal
    """
    capacity = _check_capacity(capacity)
    return {policy: simulate(pages, capacity, policy) for policy in ReplacementPolicy.ALL}
