import pytest

from dsalab.campus_graph import LANDMARKS, CampusGraph, main


def test_default_dfs_order():
    assert CampusGraph().dfs(0) == [
        "College Main Gate",
        "Library",
        "Auditorium",
        "Sports Complex",
        "Hostel",
        "Cafeteria",
    ]


def test_default_bfs_order():
    assert CampusGraph().bfs(0) == list(LANDMARKS)


def test_walks_visit_every_landmark_once():
    graph = CampusGraph()
    for start in range(len(LANDMARKS)):
        for walk in (graph.dfs(start), graph.bfs(start)):
            assert sorted(walk) == sorted(LANDMARKS)
            assert walk[0] == LANDMARKS[start]


def test_dfs_uses_index_order_bfs_uses_edge_order():
    names = ("hub", "a", "b", "c")
    graph = CampusGraph(names, [(0, 3), (0, 1), (0, 2)])
    assert graph.dfs(0) == ["hub", "a", "b", "c"]
    assert graph.bfs(0) == ["hub", "c", "a", "b"]


def test_path_graph_walks_follow_the_path():
    names = ("p", "q", "r", "s")
    graph = CampusGraph(names, [(0, 1), (1, 2), (2, 3)])
    assert graph.dfs(0) == list(names)
    assert graph.bfs(0) == list(names)


def test_only_reachable_component_is_visited():
    names = ("a", "b", "c", "d")
    graph = CampusGraph(names, [(0, 1), (2, 3)])
    assert sorted(graph.dfs(0)) == ["a", "b"]
    assert sorted(graph.bfs(3)) == ["c", "d"]


def test_isolated_start():
    graph = CampusGraph(("solo", "other"), [])
    assert graph.dfs(1) == ["other"]
    assert graph.bfs(0) == ["solo"]


def test_bad_start_raises():
    graph = CampusGraph()
    with pytest.raises(IndexError):
        graph.dfs(len(LANDMARKS))
    with pytest.raises(IndexError):
        graph.bfs(-1)


def test_bad_edge_raises():
    with pytest.raises(ValueError):
        CampusGraph(("a", "b"), [(0, 2)])


def test_main_prints_both_walks(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "DFS Traversal (using Adjacency Matrix)" in out
    assert "BFS Traversal (using Adjacency List)" in out
    assert out.count("-> END") == 2