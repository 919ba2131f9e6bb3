"""The BLAKE2 compression function F and its mixing primitive G."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import G_INDEX_MAP, SIGMA, Blake2Params
from .words import WordOps


def mix(
    v: list[int],
    a: int,
    b: int,
    c: int,
    d: int,
    x: int,
    y: int,
    ops: WordOps,
    rotations: Sequence[int],
) -> None:
    """Apply G to positions ``a, b, c, d`` of the working vector in place."""

    r1, r2, r3, r4 = rotations
    mask = ops.mask
    v[a] = (v[a] + v[b] + x) & mask
    v[d] = ops.rotr(v[d] ^ v[a], r1)
    v[c] = (v[c] + v[d]) & mask
    v[b] = ops.rotr(v[b] ^ v[c], r2)
    v[a] = (v[a] + v[b] + y) & mask
    v[d] = ops.rotr(v[d] ^ v[a], r3)
    v[c] = (v[c] + v[d]) & mask
    v[b] = ops.rotr(v[b] ^ v[c], r4)


def run_round(v: list[int], m: Sequence[int], schedule: Sequence[int], params: Blake2Params) -> None:
    """One full round: G over the four columns, then the four diagonals."""

    for i, (a, b, c, d) in enumerate(G_INDEX_MAP):
        mix(v, a, b, c, d, m[schedule[2 * i]], m[schedule[2 * i + 1]], params.ops, params.rotations)


def compress(
    params: Blake2Params,
    state: Sequence[int],
    block: bytes,
    counter: int,
    is_final: bool,
) -> list[int]:
    """Compress one full-size ``block`` into ``state``.

    Args:
        params: Variant parameters (word width, IV, rounds, rotations).
        state: Current 8-word chaining state.
        block: Exactly ``params.block_size`` bytes.
        counter: Total bytes absorbed up to and including this block.
        is_final: Whether this is the last compression of the message.

    Returns:
        The new 8-word state. ``state`` itself is left untouched.
    """

    assert len(block) == params.block_size

    ops = params.ops
    m = ops.words_from_bytes(block)
    v = list(state) + list(params.iv)

    low, high = ops.split(counter)
    v[12] ^= low
    v[13] ^= high
    if is_final:
        v[14] ^= ops.mask

    for r in range(params.rounds):
        run_round(v, m, SIGMA[r % len(SIGMA)], params)

    return [state[i] ^ v[i] ^ v[i + 8] for i in range(8)]
