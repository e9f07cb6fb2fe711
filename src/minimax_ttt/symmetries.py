"""
Board symmetries (the 8 rotations and reflections of the square).

A map `mp` transforms a board as `new[i] = board[mp[i]]`. Every map is a
power of the quarter turn, optionally followed by the left-right mirror.
"""

import torch
from typing import List, Sequence, Tuple

# new[i] = old[ROTATE_90[i]], clockwise quarter turn
ROTATE_90 = torch.tensor([6, 3, 0, 7, 4, 1, 8, 5, 2], dtype=torch.long)
# new[i] = old[MIRROR[i]], swap left and right columns
MIRROR = torch.tensor([2, 1, 0, 5, 4, 3, 8, 7, 6], dtype=torch.long)


def _compose(first: torch.Tensor, then: torch.Tensor) -> torch.Tensor:
    """Map equal to applying `first`, then `then`."""
    return first[then]


def _build_symmetry_maps() -> List[torch.Tensor]:
    """IDs 0-3: rotations by 0/90/180/270; IDs 4-7: the same, then mirrored."""
    rotations = [torch.arange(9)]
    for _ in range(3):
        rotations.append(_compose(rotations[-1], ROTATE_90))
    return rotations + [_compose(r, MIRROR) for r in rotations]


# Pre-computed symmetry maps
SYM_MAPS = _build_symmetry_maps()


def apply_symmetry_board(board: Sequence[int], sym_id: int) -> List[int]:
    """Return the transformed board as a list of ints."""
    mp = SYM_MAPS[sym_id].tolist()
    return [int(board[j]) for j in mp]


def apply_symmetry_policy(pi: torch.Tensor, sym_id: int) -> torch.Tensor:
    """Transform a [9] per-square tensor (policy or mask) like its board."""
    return pi.index_select(0, SYM_MAPS[sym_id].to(pi.device))


def inverse_symmetry(sym_id: int) -> int:
    """Return the symmetry ID that undoes `sym_id`."""
    identity = torch.arange(9)
    for k, mp in enumerate(SYM_MAPS):
        if torch.equal(_compose(SYM_MAPS[sym_id], mp), identity):
            return k
    raise ValueError(f"no inverse for symmetry {sym_id}")


def map_move(action: int, sym_id: int) -> int:
    """Square that `action` lands on once its board is transformed."""
    return int(SYM_MAPS[inverse_symmetry(sym_id)][action])


def get_all_symmetries(board: Sequence[int]) -> List[List[int]]:
    """Return all 8 symmetric versions of a board (ID order)."""
    return [apply_symmetry_board(board, k) for k in range(len(SYM_MAPS))]


def canonical_board(board: Sequence[int]) -> Tuple[int, ...]:
    """Lexicographically smallest symmetric version, usable as a dict key."""
    return min(tuple(b) for b in get_all_symmetries(board))
