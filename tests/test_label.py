import pytest

from netlayout.geometry import BoundingBox, Dimensions, Point
from netlayout.label import GraphNode, Label


def make_label(**kwargs):
    box = BoundingBox(Point(1.5, 2.5), Dimensions(10.0, 4.0))
    return Label(box, **kwargs)


def test_original_box_recorded():
    label = make_label()
    orig = label.original_box
    assert (orig.position.x, orig.position.y) == (1.5, 2.5)
    assert (orig.dimensions.width, orig.dimensions.height) == (10.0, 4.0)


def test_scale_one_restores_original():
    label = make_label()
    label.scale(3.0)
    label.scale(1.0)
    assert (label.x, label.y, label.width, label.height) == (1.5, 2.5, 10.0, 4.0)


def test_scale_uses_original_not_current():
    label = make_label()
    label.scale(2.0)
    first = (label.x, label.y, label.width, label.height)
    label.scale(2.0)
    assert (label.x, label.y, label.width, label.height) == first


def test_scale_ratio_is_preserved():
    label = make_label()
    label.scale(2.5)
    assert label.width / label.height == pytest.approx(10.0 / 4.0)
    assert label.x / label.y == pytest.approx(1.5 / 2.5)


def test_adapt_to_height_keeps_aspect_ratio():
    label = make_label()
    label.adapt_to_height(8.0)
    assert label.height == 8.0
    assert label.width / label.height == pytest.approx(10.0 / 4.0)
    assert (label.x, label.y) == (1.5, 2.5)


def test_adapt_to_zero_height_box_fails():
    label = Label(BoundingBox(Point(0, 0), Dimensions(5.0, 0.0)))
    with pytest.raises(ZeroDivisionError):
        label.adapt_to_height(3.0)


def test_scale_position_keeps_size():
    label = make_label()
    label.scale_position(0.0)
    assert (label.x, label.y) == (0.0, 0.0)
    assert (label.width, label.height) == (10.0, 4.0)


def test_scale_position_by_one_is_identity():
    label = make_label()
    label.scale_position(1.0)
    assert (label.x, label.y) == (1.5, 2.5)


def test_display_text_prefers_explicit_text():
    label = make_label(text="ATP", model_object_key="k1")
    assert label.display_text({"k1": "glucose"}) == "ATP"


def test_display_text_falls_back_to_object_name():
    label = make_label(model_object_key="k1")
    assert label.display_text({"k1": "glucose"}) == "glucose"


def test_display_text_unknown_object_is_unset():
    label = make_label(model_object_key="missing")
    assert label.display_text({}) == "unset"


def test_graph_node_description():
    node = GraphNode(
        size=12.0,
        original_key="Layout_1",
        object_key="Metabolite_3",
        label_text="NADH",
    )
    lines = str(node).splitlines()
    assert lines[0] == "node key: Layout_1  size: 12.0"
    assert lines[1] == "object key: Metabolite_3"
    assert lines[-1] == "label: NADH"


def test_graph_node_label_text_is_settable():
    node = GraphNode(size=5.0)
    node.label_text = "pyruvate"
    assert "label: pyruvate" in str(node)