from graphsearch.cli import main


def test_default_traversal(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "BFS traversal starting from Alice:"
    assert lines[1].split() == ["Alice", "Bob", "Charlie", "David", "Eve", "Frank", "Grace"]


def test_custom_start(capsys):
    assert main(["Bob"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "BFS traversal starting from Bob:"
    assert lines[1].split() == ["Bob", "David", "Eve"]


def test_leaf_start_prints_only_itself(capsys):
    main(["Grace"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].split() == ["Grace"]