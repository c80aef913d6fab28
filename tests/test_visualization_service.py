import pytest

import brand_colours as bc
from services import visualization_service
from models.series import SeriesPoint
from services.visualization_service import (
    build_color_map, nice_domain, render_chart, line_widths, hover_details,
    format_count, format_percentage, select_visible
)


def test_colours_follow_region_order_and_cycle():
    regions = [f"Region {i}" for i in range(12)]

    colors = build_color_map(regions)

    assert colors["Region 0"] == bc.REGION_PALETTE[0]
    assert colors["Region 9"] == bc.REGION_PALETTE[9]
    assert colors["Region 10"] == bc.REGION_PALETTE[0]


@pytest.mark.parametrize("upper, expected", [
    (0.7, 0.7),
    (0.3, 0.3),
    (0.47, 0.5),
    (0.123, 0.13),
    (42, 45),
])
def test_nice_domain_rounds_upper_bound_outward(upper, expected):
    start, stop = nice_domain(0.0, upper)

    assert start == 0
    assert stop == pytest.approx(expected)
    assert stop >= upper or stop == pytest.approx(upper)


def test_nice_domain_keeps_bounds_when_step_is_zero(monkeypatch):
    monkeypatch.setattr(visualization_service, "tick_increment", lambda start, stop, count: 0)

    assert nice_domain(0.0, 0.47) == (0.0, 0.47)


def test_nice_domain_keeps_bounds_when_step_never_settles(monkeypatch):
    steps = iter([0.1, 0.2] * 10)
    monkeypatch.setattr(visualization_service, "tick_increment", lambda start, stop, count: next(steps))

    assert nice_domain(0.0, 0.47) == (0.0, 0.47)


def test_empty_selection_draws_nothing(two_region_dataset):
    result = render_chart(two_region_dataset, [])

    assert result.is_empty
    assert result.figure is None
    assert result.visible_regions == []
    assert result.y_domain is None


def test_render_is_idempotent(two_region_dataset):
    first = render_chart(two_region_dataset, ["A", "B"])
    second = render_chart(two_region_dataset, ["A", "B"])

    assert first.visible_regions == second.visible_regions
    assert first.x_domain == second.x_domain
    assert first.y_domain == second.y_domain
    assert first.colors == second.colors
    assert first.figure.to_dict() == second.figure.to_dict()


def test_colour_is_stable_across_selections(two_region_dataset):
    only_b = render_chart(two_region_dataset.series, ["B"])
    both = render_chart(two_region_dataset.series, ["A", "B"])

    assert only_b.colors["B"] == both.colors["B"]
    assert only_b.figure.data[0].line.color == both.figure.data[1].line.color


def test_adding_a_region_rescales_y_but_not_x(two_region_dataset):
    only_a = render_chart(two_region_dataset, ["A"])
    both = render_chart(two_region_dataset, ["A", "B"])

    assert only_a.x_domain == both.x_domain == (2019, 2020)
    assert only_a.y_domain[1] == pytest.approx(0.3)
    assert both.y_domain[1] >= 0.70
    assert both.y_domain[1] > only_a.y_domain[1]
    assert list(both.figure.layout.yaxis.range) == list(both.y_domain)
    assert list(both.figure.layout.xaxis.range) == [2019, 2020]


def test_visible_series_keep_dataset_order(two_region_dataset):
    result = render_chart(two_region_dataset, ["B", "A"])

    assert result.visible_regions == ["A", "B"]
    assert [trace.name for trace in result.figure.data] == ["A", "B"]


def test_one_line_per_visible_region_with_hover_targets(two_region_dataset):
    figure = render_chart(two_region_dataset, ["A"]).figure

    assert len(figure.data) == 1
    trace = figure.data[0]
    assert list(trace.x) == [2019, 2020]
    assert list(trace.y) == pytest.approx([0.25, 0.30])
    assert trace.mode == "lines+markers"
    assert trace.line.width == 2
    assert [row[0] for row in trace.customdata] == ["A", "A"]


def test_terminal_point_is_labelled_with_region(two_region_dataset):
    figure = render_chart(two_region_dataset, ["A", "B"]).figure

    labels = {annotation.text: annotation for annotation in figure.layout.annotations}
    assert set(labels) == {"A", "B"}
    assert labels["B"].x == 2020
    assert labels["B"].y == pytest.approx(0.70)
    assert labels["B"].font.color == two_region_dataset.colors["B"]


def test_unknown_regions_are_ignored(two_region_dataset):
    visible = select_visible(two_region_dataset.series, ["A", "Atlantis"])

    assert [s.region for s in visible] == ["A"]


def test_highlight_thickens_only_the_hovered_region():
    assert line_widths(["A", "B", "C"], "A") == [4, 2, 2]
    assert line_widths(["A", "B"]) == [2, 2]


def test_hover_details_format_counts_and_percentage():
    point = SeriesPoint(year=2020, count=1300.0, total=4600.0, percentage=1300 / 4600)

    details = hover_details("British Columbia, origin", point)

    assert details["Year"] == "2020"
    assert details["Students from British Columbia in Ontario"] == "1,300"
    assert details["Total Students in Ontario in 2020"] == "4,600"
    assert details["Percentage"] == "28.26%"


def test_number_formatting():
    assert format_percentage(0.3) == "30.00%"
    assert format_count(30.0) == "30"
    assert format_count(12.5) == "12.50"
