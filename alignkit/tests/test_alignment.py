"""Tests for aligning elements to one another."""

import pytest

from alignkit.constraints.alignment import AlignmentConstraint, AlignType, align_elements
from alignkit.constraints.errors import CallbackTypeError, CardinalityError, ResolutionError
from alignkit.dsl.schema import BoundingBox, PositionChange, Scene
from alignkit.engine import Aligner, SceneAccessor
from alignkit.tests.conftest import FailingAccessor, make_element, positions


CARDS = ("a", "b", "c")


class TestSelfAlignment:
    """Tests for each alignment type on the sample cards."""

    def test_top(self, aligner: Aligner, scene: Scene) -> None:
        """Test every card moves to the topmost edge."""
        aligner.top(".card")
        assert positions(scene, *CARDS) == [(10, 10), (140, 10), (60, 10)]

    def test_bottom(self, aligner: Aligner, scene: Scene) -> None:
        """Test every card's bottom meets the bottommost edge."""
        aligner.bottom(".card")
        assert positions(scene, *CARDS) == [(10, 110), (140, 130), (60, 100)]

    def test_left(self, aligner: Aligner, scene: Scene) -> None:
        """Test every card moves to the leftmost edge."""
        aligner.left(".card")
        assert positions(scene, *CARDS) == [(10, 40), (10, 10), (10, 100)]

    def test_right(self, aligner: Aligner, scene: Scene) -> None:
        """Test every card's right edge meets the rightmost edge."""
        aligner.right(".card")
        assert positions(scene, *CARDS) == [(120, 40), (140, 10), (180, 100)]

    def test_center(self, aligner: Aligner, scene: Scene) -> None:
        """Test cards center on the mean of their centers (106)."""
        aligner.center(".card")
        assert positions(scene, *CARDS) == [(56, 40), (66, 10), (86, 100)]

    def test_vertical(self, aligner: Aligner, scene: Scene) -> None:
        """Test cards middle on the mean of their middles (73)."""
        aligner.vertical(".card")
        assert positions(scene, *CARDS) == [(10, 48), (140, 58), (60, 43)]

    def test_center_on_containing_element(self) -> None:
        """Test nested elements center on the widest one."""
        scene = Scene(
            elements=[
                make_element("outer", 0, 0, 100, 10),
                make_element("inner", 70, 20, 20, 10),
            ]
        )
        Aligner(SceneAccessor(scene)).center(".card")
        assert positions(scene, "outer", "inner") == [(0, 0), (40, 20)]

    def test_other_axis_untouched(self, aligner: Aligner) -> None:
        """Test horizontal alignment leaves y alone and vice versa."""
        for record in aligner.left(".card"):
            assert record.dy == 0
        for record in aligner.top(".card"):
            assert record.dx == 0

    def test_frame_is_not_moved(self, aligner: Aligner, scene: Scene) -> None:
        """Test elements outside the selection stay put."""
        aligner.right(".card")
        assert positions(scene, "frame") == [(0, 0)]


class TestRecords:
    """Tests for the records returned by self alignment."""

    def test_one_record_per_element_in_order(self, aligner: Aligner, scene: Scene) -> None:
        """Test records follow resolution order."""
        records = aligner.top(["#c", "#a", "#b"])
        assert [r.node.id for r in records] == ["c", "a", "b"]

    def test_record_values(self, aligner: Aligner) -> None:
        """Test prev/next coordinates."""
        records = aligner.bottom(".card")
        assert [r.to_dict(node_key=lambda e: e.id) for r in records] == [
            {"node": "a", "prevX": 10, "prevY": 40, "nextX": 10, "nextY": 110},
            {"node": "b", "prevX": 140, "prevY": 10, "nextX": 140, "nextY": 130},
            {"node": "c", "prevX": 60, "prevY": 100, "nextX": 60, "nextY": 100},
        ]

    def test_without_node_reference(self, accessor: SceneAccessor) -> None:
        """Test records can omit the element handle."""
        records = Aligner(accessor, include_node=False).left(".card")
        assert all(r.node is None for r in records)

    def test_idempotent(self, aligner: Aligner) -> None:
        """Test a second top alignment changes nothing."""
        first = aligner.top(".card")
        second = aligner.top(".card")
        assert [r.prev_y for r in second] == [r.next_y for r in first]
        assert [r.next_y for r in second] == [r.next_y for r in first]
        assert not any(r.moved for r in second)

    def test_read_back_after_clamping(self) -> None:
        """Test records report the clamped position, not the target."""
        scene = Scene(
            elements=[
                make_element("wide", 0, 0, 100, 10),
                make_element("narrow", 40, 20, 10, 10),
            ],
            bounds=BoundingBox(x=0, y=0, width=90, height=100),
        )
        records = Aligner(SceneAccessor(scene)).right(".card")
        # the group's right edge (100) lies past the bounds (90)
        assert records[1].next_x == 80
        assert scene.get_element("narrow").bbox.x == 80


class TestHandler:
    """Tests for completion handlers."""

    def test_handler_receives_records(self, aligner: Aligner) -> None:
        """Test the handler gets the returned list."""
        received: list[list[PositionChange]] = []
        records = aligner.left(".card", handler=received.append)
        assert received == [records]

    def test_handler_runs_after_moves(self, aligner: Aligner, scene: Scene) -> None:
        """Test the handler sees the final positions."""
        seen: list[list[tuple[int, int]]] = []
        aligner.top(".card", handler=lambda records: seen.append(positions(scene, *CARDS)))
        assert seen == [[(10, 10), (140, 10), (60, 10)]]

    def test_non_callable_handler_rejected_before_moving(self, aligner: Aligner, scene: Scene) -> None:
        """Test invalid handlers fail without moving anything."""
        before = positions(scene, *CARDS)
        with pytest.raises(CallbackTypeError):
            aligner.top(".card", handler="done")
        assert positions(scene, *CARDS) == before

    def test_handler_errors_propagate(self, aligner: Aligner) -> None:
        """Test exceptions from the handler reach the caller."""
        def boom(records: list[PositionChange]) -> None:
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            aligner.top(".card", handler=boom)


class TestWriteFailure:
    """Tests for accessor errors raised while moving elements."""

    @pytest.fixture
    def row(self) -> Scene:
        """Centers 10, 40 and 120; none contains the others, mean floors to 56."""
        return Scene(
            elements=[
                make_element("p", 0, 0, 20, 10),
                make_element("q", 30, 0, 20, 10),
                make_element("r", 100, 0, 40, 10),
            ]
        )

    def test_error_propagates_and_earlier_moves_stay(self, row: Scene) -> None:
        """Test elements moved before the failing one keep their new position."""
        handled = []
        aligner = Aligner(FailingAccessor(row, fail_on="r"))

        with pytest.raises(RuntimeError, match="cannot move r"):
            aligner.center(".card", handler=handled.append)

        assert positions(row, "p", "q", "r") == [(46, 0), (46, 0), (100, 0)]
        assert handled == []

    def test_distribution_stops_at_failing_element(self, scene: Scene) -> None:
        """Test a chained layout keeps the moves made before the failure."""
        aligner = Aligner(FailingAccessor(scene, fail_on="b"))

        with pytest.raises(RuntimeError, match="cannot move b"):
            aligner.sort_center(".card", 10)

        # sorted by left: a (10), c (60), b (140)
        assert positions(scene, "a", "c", "b") == [(10, 40), (120, 100), (140, 10)]


class TestValidation:
    """Tests for input validation."""

    def test_single_element_rejected(self, aligner: Aligner, scene: Scene) -> None:
        """Test one element is not enough to align."""
        received: list[list[PositionChange]] = []
        with pytest.raises(CardinalityError):
            aligner.top("#a", handler=received.append)
        assert received == []
        assert positions(scene, "a") == [(10, 40)]

    def test_cardinality_error_is_value_error(self, aligner: Aligner) -> None:
        """Test the error can be caught as ValueError."""
        with pytest.raises(ValueError):
            aligner.center(["#b"])

    def test_unknown_selector(self, aligner: Aligner) -> None:
        """Test selectors that match nothing."""
        with pytest.raises(ResolutionError):
            aligner.left(".missing")

    def test_unknown_align_type(self, accessor: SceneAccessor) -> None:
        """Test invalid alignment types are rejected."""
        with pytest.raises(ValueError):
            align_elements(accessor, ".card", "diagonal")

    def test_short_accessor_result_rejected(self, scene: Scene) -> None:
        """Test the operation checks cardinality itself."""

        class LenientAccessor(SceneAccessor):
            def resolve(self, selectors, require_multiple=False):
                return [self.scene.get_element("a")]

        with pytest.raises(CardinalityError):
            AlignmentConstraint(LenientAccessor(scene), "anything", AlignType.TOP).apply()


class TestConvenienceFunction:
    """Tests for align_elements."""

    def test_string_align_type(self, accessor: SceneAccessor, scene: Scene) -> None:
        """Test align types may be given by value."""
        align_elements(accessor, ".card", "left")
        assert positions(scene, *CARDS) == [(10, 40), (10, 10), (10, 100)]

    def test_constraint_apply(self, accessor: SceneAccessor) -> None:
        """Test the constraint object directly."""
        constraint = AlignmentConstraint(accessor, ".card", AlignType.MIDDLE, include_node=False)
        records = constraint.apply()
        assert [r.next_y for r in records] == [48, 58, 43]
