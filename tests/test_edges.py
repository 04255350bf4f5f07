"""Tests for Line and Arrow edges."""

import pytest

from adjgraph import (
    Arrow,
    Directed,
    Edge,
    InvalidConstructionError,
    Line,
    NullArgumentError,
    Vertex,
    Weight,
)


class TestLine:
    """Tests for undirected Line edges."""

    def test_create_unweighted(self, a, b):
        """Test that an omitted weight reads back as None."""
        line = Line.create(a, b)
        assert line.weight() is None
        assert line.endpoints() == (a, b)
        assert line.is_directed is False

    def test_create_weighted(self, a, b):
        """Test that weights may be bare numbers or Weight instances."""
        assert Line.create(a, b, 5).weight() == 5
        assert Line.create(a, b, Weight(5)).weight() == Weight(5)

    @pytest.mark.parametrize("first, second", [(None, Vertex(2)), (Vertex(1), None), (None, None)])
    def test_null_endpoint_rejected(self, first, second):
        """Test that None endpoints are null arguments."""
        with pytest.raises(NullArgumentError):
            Line.create(first, second)

    def test_explicit_none_weight_rejected(self, a, b):
        """Test that passing weight=None is a null argument."""
        with pytest.raises(NullArgumentError):
            Line.create(a, b, None)

    def test_self_loop_rejected(self, a):
        """Test that a line cannot join a vertex to itself."""
        with pytest.raises(InvalidConstructionError):
            Line.create(a, Vertex(1))

    def test_non_vertex_endpoint_rejected(self, a):
        """Test that endpoints must be vertices."""
        with pytest.raises(TypeError):
            Line.create(a, 2)

    def test_equality_ignores_order(self, a, b):
        """Test that endpoints form an unordered pair."""
        assert Line(a, b) == Line(b, a)
        assert Line(a, b, 3) == Line(b, a, 3)
        assert hash(Line(a, b, 3)) == hash(Line(b, a, 3))

    def test_equality_includes_weight(self, a, b):
        """Test that lines with different weights differ."""
        assert Line(a, b, 3) != Line(a, b, 4)
        assert Line(a, b, 3) != Line(a, b)

    def test_equality_includes_endpoints(self, a, b, c):
        """Test that lines over different pairs differ."""
        assert Line(a, b) != Line(a, c)

    def test_line_never_equals_arrow(self, a, b):
        """Test that edge kinds never compare equal."""
        assert Line(a, b) != Arrow(a, b)
        assert Arrow(a, b) != Line(a, b)

    def test_reversed(self, a, b):
        """Test that reversing swaps endpoints and keeps the weight."""
        reversed_line = Line(a, b, 2).reversed()
        assert reversed_line.endpoints() == (b, a)
        assert reversed_line.weight() == 2
        assert reversed_line == Line(a, b, 2)
        assert Line(a, b).reversed().weight() is None

    def test_repr(self, a, b):
        """Test the debug representation."""
        assert repr(Line(a, b)) == "Line(Vertex(1), Vertex(2))"
        assert repr(Line(a, b, 4)) == "Line(Vertex(1), Vertex(2), weight=4)"


class TestArrow:
    """Tests for directed Arrow edges."""

    def test_create_unweighted(self, a, b):
        """Test source, target and endpoints of an unweighted arrow."""
        arrow = Arrow.create(a, b)
        assert arrow.source() == a
        assert arrow.target() == b
        assert arrow.endpoints() == (a, b)
        assert arrow.weight() is None
        assert arrow.is_directed is True

    def test_create_weighted(self, a, b):
        """Test that the weight is kept."""
        assert Arrow.create(a, b, 2.5).weight() == 2.5

    def test_self_loop_allowed(self, a):
        """Test that an arrow may leave and enter the same vertex."""
        loop = Arrow.create(a, Vertex(1))
        assert loop.source() == loop.target()

    @pytest.mark.parametrize("source, target", [(None, Vertex(2)), (Vertex(1), None)])
    def test_null_endpoint_rejected(self, source, target):
        """Test that None endpoints are null arguments."""
        with pytest.raises(NullArgumentError):
            Arrow.create(source, target)

    def test_explicit_none_weight_rejected(self, a, b):
        """Test that passing weight=None is a null argument."""
        with pytest.raises(NullArgumentError):
            Arrow.create(a, b, None)

    def test_equality_is_order_sensitive(self, a, b):
        """Test that direction matters for equality."""
        assert Arrow(a, b) == Arrow(a, b)
        assert Arrow(a, b) != Arrow(b, a)
        assert Arrow(a, a) == Arrow(a, a).reversed()

    def test_equality_includes_weight(self, a, b):
        """Test that arrows with different weights differ."""
        assert Arrow(a, b, 1) != Arrow(a, b, 2)
        assert hash(Arrow(a, b, 1)) == hash(Arrow(a, b, 1))

    def test_reversed(self, a, b):
        """Test that reversing swaps source and target."""
        assert Arrow(a, b, 7).reversed() == Arrow(b, a, 7)

    def test_kinds(self, a, b):
        """Test the edge class hierarchy."""
        assert isinstance(Arrow(a, b), Edge)
        assert isinstance(Arrow(a, b), Directed)
        assert isinstance(Line(a, b), Edge)
        assert not isinstance(Line(a, b), Directed)

    def test_edge_is_abstract(self):
        """Test that the edge contract cannot be instantiated."""
        with pytest.raises(TypeError):
            Edge()
