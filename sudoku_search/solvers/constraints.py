"""Candidate sets for the unassigned cells of a grid."""

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.candidates import CandidateSet, VALUE_MASK
from ..core.grid import SudokuGrid, ALL_CELLS, Coord, peers_of


class ConstraintStore:
    """
    Mapping from each unassigned cell to its CandidateSet.

    Built once from a grid by ``derive``; after that the search engine keeps
    it in step with the grid through ``take``/``restore`` and
    ``narrow_peers``/``widen``. At every step each entry equals what a fresh
    ``derive`` of the current grid would produce.
    """

    def __init__(self, entries: Optional[Dict[Coord, CandidateSet]] = None):
        self._entries: Dict[Coord, CandidateSet] = entries if entries is not None else {}

    @classmethod
    def derive(cls, grid: SudokuGrid) -> ConstraintStore:
        """
        Compute candidates for every unassigned cell.

        One pass collects the used values per row, column and box; each
        empty cell then gets the complement of their union within 1..9.
        """
        units = grid.unit_sets()
        entries = {}
        for row, col in ALL_CELLS:
            if grid.is_empty(row, col):
                candidates = units.used_by(row, col)
                candidates.complement_within(VALUE_MASK)
                entries[(row, col)] = candidates
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._entries

    def __getitem__(self, coord: Coord) -> CandidateSet:
        return self._entries[coord]

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def take(self, coord: Coord) -> CandidateSet:
        """Remove and return the entry for a cell that is being assigned."""
        return self._entries.pop(coord)

    def restore(self, coord: Coord, candidates: CandidateSet) -> None:
        """Put back the entry of a cell that has been unassigned."""
        self._entries[coord] = candidates

    def narrow_peers(self, coord: Coord, value: int) -> List[Coord]:
        """
        Remove ``value`` from every peer of ``coord`` still in the store.

        Returns:
            The peers whose sets actually lost ``value``.
        """
        affected = []
        for peer in peers_of(*coord):
            candidates = self._entries.get(peer)
            if candidates is not None and candidates.contains(value):
                candidates.remove(value)
                affected.append(peer)
        return affected

    def widen(self, coords: List[Coord], value: int) -> None:
        """Give ``value`` back to each cell in ``coords``."""
        for coord in coords:
            candidates = self._entries.get(coord)
            if candidates is not None:
                candidates.insert(value)

    def select_min(self) -> Tuple[Coord, CandidateSet]:
        """
        Cell with the fewest candidates (minimum remaining values).

        Ties go to the first cell in row-major order. A cell with no
        candidates is returned immediately.
        """
        best_coord = None
        best_candidates = None
        best_count = 10
        for coord in ALL_CELLS:
            candidates = self._entries.get(coord)
            if candidates is None:
                continue
            count = candidates.cardinality()
            if count < best_count:
                best_coord, best_candidates, best_count = coord, candidates, count
                if count == 0:
                    break
        if best_coord is None:
            raise KeyError("select_min() on an empty constraint store")
        return best_coord, best_candidates

    def snapshot(self) -> Dict[Coord, int]:
        """Plain ``coord -> bits`` copy, for comparisons and debugging."""
        return {coord: candidates.bits for coord, candidates in self._entries.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintStore):
            return False
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"ConstraintStore(cells={len(self._entries)})"
