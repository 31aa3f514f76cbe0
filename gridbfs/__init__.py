from gridbfs.bfs import (
    BLOCKED,
    DIRECTIONS,
    PASSABLE,
    PathResult,
    SearchReport,
    SearchStatus,
    bfs_search,
    check_grid,
    find_shortest_path,
    is_valid_position,
    reconstruct_path,
)
