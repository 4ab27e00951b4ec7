"""BDD step definitions for statistic set aggregation."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from metricbatch.core.aggregate import build_metric_datums
from metricbatch.core.models import Datum, Metric


@dataclass
class AggregationScenarioContext:
    """Shared state between steps in an aggregation scenario."""

    name: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    fields: dict[str, object] = field(default_factory=dict)
    datums: list[Datum] = field(default_factory=list)

    def datum(self, name: str) -> Datum:
        matching = [d for d in self.datums if d.metric_name == name]
        assert len(matching) == 1, f"Expected one datum {name}, got {matching}"
        return matching[0]


@pytest.fixture
def ctx() -> AggregationScenarioContext:
    """Fresh scenario context for each test."""
    return AggregationScenarioContext()


def _rows(datatable: list[list[str]]) -> list[list[str]]:
    """Drop the header row of a data table."""
    return datatable[1:]


# === Given ===
@given(parsers.parse('a metric named "{name}" tagged:'))
def step_metric_tagged(
    ctx: AggregationScenarioContext, name: str, datatable: list[list[str]]
) -> None:
    ctx.name = name
    ctx.tags = {tag: value for tag, value in _rows(datatable)}


@given("the metric has fields:")
def step_metric_fields(
    ctx: AggregationScenarioContext, datatable: list[list[str]]
) -> None:
    ctx.fields = {name: float(value) for name, value in _rows(datatable)}


# === When ===
@when(parsers.parse("the metric is converted with statistics {state}"))
def step_convert(ctx: AggregationScenarioContext, state: str) -> None:
    metric = Metric(name=ctx.name, fields=ctx.fields, tags=ctx.tags, timestamp=1000.0)
    ctx.datums = build_metric_datums(metric, write_statistics=state == "enabled")


# === Then ===
@then(parsers.re(r"(?P<n>\d+) datums? (is|are) produced"))
def step_datum_count(ctx: AggregationScenarioContext, n: str) -> None:
    assert len(ctx.datums) == int(n)


@then(
    parsers.parse(
        'the datum "{name}" carries a statistic set with sum {total:g} and count {count:g}'
    )
)
def step_statistic_set(
    ctx: AggregationScenarioContext, name: str, total: float, count: float
) -> None:
    stats = ctx.datum(name).statistic_values
    assert stats is not None
    assert stats.sum == total
    assert stats.sample_count == count


@then(parsers.parse('the datum "{name}" carries the value {value:g}'))
def step_value(ctx: AggregationScenarioContext, name: str, value: float) -> None:
    datum = ctx.datum(name)
    assert datum.statistic_values is None
    assert datum.value == value


@then(parsers.parse('no datum named "{name}" is produced'))
def step_no_datum(ctx: AggregationScenarioContext, name: str) -> None:
    assert all(d.metric_name != name for d in ctx.datums)


@then(parsers.parse('every datum has dimensions "{names}"'))
def step_dimensions(ctx: AggregationScenarioContext, names: str) -> None:
    expected = names.split(",")
    for datum in ctx.datums:
        assert [d.name for d in datum.dimensions] == expected
