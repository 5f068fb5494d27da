import numpy as np
import pandas as pd
from bs4 import BeautifulSoup

import suite
from dql import Seq, NodeSet, ValueSet, Ok, Err, from_nodes, from_iterable, EntityNotFound

test = suite.test
assert_that = suite.assert_that


def links():
    doc = BeautifulSoup('<a href="/x" id="1">x</a><a id="2">y</a><!-- note -->',
                        'html.parser', multi_valued_attributes=None)
    return from_nodes(doc.contents)


# --- counting ---

@test("count and len count every item")
def test_count():
    nodes = links()
    assert_that(nodes.to.count() == 3, f"got {nodes.to.count()}")
    assert_that(len(nodes) == 3, "len should match count")
    assert_that(nodes.named('a').to.count() == 2, "two links")


@test("any stops at the first item")
def test_any():
    pulled = []

    def producer(consume):
        for i in range(10):
            pulled.append(i)
            if not consume(Ok(i)):
                return

    assert_that(ValueSet(Seq(producer)).to.any(), "set should not be empty")
    assert_that(pulled == [0], f"pulled {pulled}")
    assert_that(not links().named('p').to.any(), "no paragraphs")


@test("conversions of a failed set are empty")
def test_failed_conversions():
    nodes = NodeSet.failed(RuntimeError("boom"))
    assert_that(nodes.to.list() == [], "list")
    assert_that(nodes.to.count() == 0 and not nodes.to.any(), "count / any")
    assert_that(nodes.to.array().shape == (0,), "array")
    assert_that(nodes.to.pandas().empty and nodes.to.df().empty, "pandas")


# --- numpy / pandas ---

@test("node array is a flat object array of nodes")
def test_node_array():
    nodes = links().named('a')
    arr = nodes.to.array()
    assert_that(arr.dtype == object and arr.shape == (2,), f"got {arr.dtype} {arr.shape}")
    assert_that(arr[0]['id'] == '1', "first element should be the first link")


@test("value array holds values with None for errors")
def test_value_array():
    arr = links().named('a').attr('href').to.array()
    assert_that(list(arr) == ['/x', None], f"got {list(arr)}")


@test("value series holds values with None for errors")
def test_value_series():
    series = links().named('a').attr('href').to.pandas()
    assert_that(isinstance(series, pd.Series), "not a series")
    assert_that(series.tolist() == ['/x', None], f"got {series.tolist()}")


@test("node dataframe has a row per node with kind, tag and attributes")
def test_node_df():
    df = links().to.df()
    assert_that(df['_kind'].tolist() == ['element', 'element', 'comment'], f"got {df['_kind'].tolist()}")
    assert_that(df['_tag'].tolist()[:2] == ['a', 'a'], "tags")
    assert_that(df['id'].tolist()[:2] == ['1', '2'], "ids")
    assert_that(pd.isna(df['href'].iloc[1]), "missing attribute should be empty")


@test("value dataframe has value and error columns")
def test_value_df():
    values = ValueSet(from_iterable([Ok('v'), Err(EntityNotFound())]))
    df = values.to.df()
    assert_that(list(df.columns) == ['value', 'error'], f"got {list(df.columns)}")
    assert_that(df['value'].iloc[0] == 'v' and df['error'].iloc[0] is None, "ok row")
    assert_that(isinstance(df['error'].iloc[1], EntityNotFound), "err row")


@test("values array supports numpy masks")
def test_value_mask():
    arr = links().named('a').attr('href').to.array()
    mask = np.array([v is not None for v in arr])
    assert_that(arr[mask].tolist() == ['/x'], f"got {arr[mask].tolist()}")


if __name__ == "__main__":
    suite.run(title="dql terminal tests")
