import pytest

from smallgraph import exceptions as exc


@pytest.mark.parametrize(
    "error, builtin",
    [
        (exc.DimensionMismatch(3, 2), ValueError),
        (exc.InvalidEdgeSource(1, 0), ValueError),
        (exc.InvalidEdgeTarget(0, 5, 2), ValueError),
        (exc.InvalidEdgeWeight(0, 1, -1), ValueError),
        (exc.IndexOutOfBounds(7, 3), IndexError),
        (exc.CostOverflow(11, 10), OverflowError),
    ],
)
def test_hierarchy(error, builtin):
    """Each error is both a GraphError and its matching builtin."""
    assert isinstance(error, exc.GraphError)
    assert isinstance(error, builtin)


def test_messages():
    assert str(exc.DimensionMismatch(3, 2)) == "Graph has 3 nodes but 2 adjacency entries."
    assert "0->5" in str(exc.InvalidEdgeTarget(0, 5, 2))
    assert "[0, 3)" in str(exc.IndexOutOfBounds(7, 3))
    assert "-1" in str(exc.InvalidEdgeWeight(0, 1, -1))
