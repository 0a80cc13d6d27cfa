"""Hex board helpers."""

from .board import HexBoard, axial_to_matrix, cell_key, matrix_to_axial, parse_cell_key
from .cluster_generation import generate_clusters, normalize_cluster, partition_cells
from .difficulty import Difficulty, SizeRange, size_range_for
from .levels import LEVELS, LevelSpec
from .piece import ClusterPiece

__all__ = [
    "ClusterPiece",
    "Difficulty",
    "HexBoard",
    "LEVELS",
    "LevelSpec",
    "SizeRange",
    "axial_to_matrix",
    "cell_key",
    "generate_clusters",
    "matrix_to_axial",
    "normalize_cluster",
    "parse_cell_key",
    "partition_cells",
    "size_range_for",
]
