"""Carve a board into connected puzzle pieces."""

from __future__ import annotations

import logging
import random

from hex_puzzle.boards.board import matrix_to_axial
from hex_puzzle.boards.difficulty import SizeRange, size_range_for
from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.config import GENERATION_MAX_ATTEMPTS, GIANT_PIECE_SLACK, PIECE_PALETTE
from hex_puzzle.hex_coords import Coord, neighbor_coords

logger = logging.getLogger(__name__)


def _find_available_neighbor(cluster: list[Coord], available: set[Coord]) -> Coord | None:
    for coord in cluster:
        for neighbor in neighbor_coords(*coord):
            if neighbor in available:
                return neighbor
    return None


def _grow_cluster(seed: Coord, target_size: int, pool: list[Coord], available: set[Coord]) -> list[Coord]:
    cluster = [seed]
    while len(cluster) < target_size and available:
        neighbor = _find_available_neighbor(cluster, available)
        if neighbor is None:
            break
        available.remove(neighbor)
        pool.remove(neighbor)
        cluster.append(neighbor)
    return cluster


def _adjacent_clusters(fragment: list[Coord], clusters: list[list[Coord]]) -> list[list[Coord]]:
    fragment_set = set(fragment)
    touching = set()
    for coord in fragment:
        touching.update(n for n in neighbor_coords(*coord) if n not in fragment_set)

    return [
        cluster
        for cluster in clusters
        if cluster is not fragment and any(coord in touching for coord in cluster)
    ]


def _merge_fragments(clusters: list[list[Coord]], min_size: int) -> None:
    """Fold under-sized clusters into their smallest neighbouring cluster.

    Fragments with no neighbouring cluster stay as they are.
    """

    stranded: set[int] = set()
    while len(clusters) > 1:
        fragments = sorted(
            (c for c in clusters if len(c) < min_size and id(c) not in stranded),
            key=len,
        )
        if not fragments:
            return

        fragment = fragments[0]
        neighbors = _adjacent_clusters(fragment, clusters)
        if not neighbors:
            stranded.add(id(fragment))
            continue

        target = min(neighbors, key=len)
        target.extend(fragment)
        clusters.remove(fragment)


def partition_cells(cells: list[Coord], size_range: SizeRange, rng) -> list[list[Coord]]:
    """Split `cells` into connected clusters sized by `size_range`.

    Every input cell ends up in exactly one cluster.
    """

    pool = list(cells)
    available = set(pool)
    clusters: list[list[Coord]] = []

    while pool:
        target_size = rng.randint(size_range.min, size_range.max)
        seed = pool.pop(rng.randrange(len(pool)))
        available.remove(seed)
        clusters.append(_grow_cluster(seed, target_size, pool, available))

    _merge_fragments(clusters, size_range.min)
    return clusters


def normalize_cluster(coords: list[Coord]) -> tuple[Coord, tuple[Coord, ...]]:
    """Return (root_pos, relative coords) with min q and min r at zero."""

    min_q = min(q for q, _ in coords)
    min_r = min(r for _, r in coords)
    return (min_q, min_r), tuple((q - min_q, r - min_r) for q, r in coords)


def build_pieces(clusters: list[list[Coord]]) -> list[ClusterPiece]:
    pieces = []
    for index, coords in enumerate(clusters):
        root_pos, relative = normalize_cluster(coords)
        pieces.append(
            ClusterPiece(
                piece_id=index,
                coords=relative,
                root_pos=root_pos,
                color=PIECE_PALETTE[index % len(PIECE_PALETTE)],
            )
        )
    return pieces


def _is_good_partition(clusters: list[list[Coord]], size_range: SizeRange) -> bool:
    if len(clusters) <= 1:
        return False
    giant = size_range.max + GIANT_PIECE_SLACK
    return all(len(c) <= giant for c in clusters)


def generate_clusters(
    matrix,
    difficulty,
    rng: random.Random | None = None,
    max_attempts: int = GENERATION_MAX_ATTEMPTS,
) -> list[ClusterPiece]:
    """Generate pieces that exactly tile the board described by `matrix`.

    Up to `max_attempts` partitions are tried; the first one with more than
    one piece and no giant piece wins, otherwise the first attempt is used.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    rng = rng or random.Random()
    cells = matrix_to_axial(matrix)
    if not cells:
        return []

    size_range = size_range_for(difficulty)
    first_attempt = None
    for attempt in range(max_attempts):
        clusters = partition_cells(cells, size_range, rng)
        if first_attempt is None:
            first_attempt = clusters
        if _is_good_partition(clusters, size_range):
            logger.debug("Generated %d pieces on attempt %d", len(clusters), attempt + 1)
            return build_pieces(clusters)

    logger.warning(
        "No partition of %d cells met the quality bar in %d attempts; using the first one",
        len(cells),
        max_attempts,
    )
    return build_pieces(first_attempt)


__all__ = [
    "build_pieces",
    "generate_clusters",
    "normalize_cluster",
    "partition_cells",
]
