"""Tests for normalize_query, target_path, PathResolver.resolve and .search."""

from __future__ import annotations

import pytest

from json_tree_graph.errors import MalformedPathError
from json_tree_graph.resolver import (
    MATCH_FOUND,
    NO_MATCH_FOUND,
    PathResolver,
    SearchStatus,
    normalize_query,
    resolve,
    target_path,
)
from json_tree_graph.session import SAMPLE_DOCUMENT
from json_tree_graph.tree.builder import GraphBuilder
from json_tree_graph.tree.nodes import Graph


@pytest.fixture(scope="module")
def graph() -> Graph:
    return GraphBuilder().build(SAMPLE_DOCUMENT)


@pytest.fixture
def resolver() -> PathResolver:
    return PathResolver()


# ---------------------------------------------------------------------------
# Query normalization
# ---------------------------------------------------------------------------


class TestNormalizeQuery:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("user", "$.user"),
            ("meta", "$.meta"),
            ("items[0].id", "items[0].id"),
            ("user.name", "user.name"),
            ("$.user", "$.user"),
            ("$user", "$user"),
            ("root", "root"),
            ("rootless", "rootless"),
            ("[0]", "[0]"),
        ],
    )
    def test_normalize(self, query: str, expected: str) -> None:
        assert normalize_query(query) == expected


class TestTargetPath:
    def test_items_id(self) -> None:
        assert target_path("$.items[0].id") == "root.items[0].id"

    def test_empty_is_root(self) -> None:
        assert target_path("") == "root"

    def test_leading_root_is_a_key(self) -> None:
        assert target_path("root.user") == "root.root.user"

    def test_malformed_raises(self) -> None:
        with pytest.raises(MalformedPathError):
            target_path("items[a]")


# ---------------------------------------------------------------------------
# resolve()
# ---------------------------------------------------------------------------


class TestResolve:
    def test_bare_identifier(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("meta", graph.nodes)
        assert node is not None
        assert node.id == "root.meta"

    def test_mixed_path(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("items[0].id", graph.nodes)
        assert node is not None
        assert node.id == "root.items[0].id"
        assert node.label == "id: 1"

    def test_dollar_path(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("$.user.address.city", graph.nodes)
        assert node is not None
        assert node.id == "root.user.address.city"

    def test_array_element(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("user.roles[1]", graph.nodes)
        assert node is not None
        assert node.label == '[1]: "ui"'

    def test_container_node(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("$.items", graph.nodes)
        assert node is not None
        assert node.label == "items [ ]"

    def test_dollar_alone_is_root(self, resolver: PathResolver, graph: Graph) -> None:
        node = resolver.resolve("$", graph.nodes)
        assert node is not None
        assert node.id == "root"

    def test_no_match(self, resolver: PathResolver, graph: Graph) -> None:
        assert resolver.resolve("user.email", graph.nodes) is None

    def test_index_out_of_range(self, resolver: PathResolver, graph: Graph) -> None:
        assert resolver.resolve("items[5]", graph.nodes) is None

    def test_malformed_is_not_found(self, resolver: PathResolver, graph: Graph) -> None:
        assert resolver.resolve("items[a]", graph.nodes) is None

    def test_unterminated_is_not_found(
        self, resolver: PathResolver, graph: Graph
    ) -> None:
        assert resolver.resolve("items[0", graph.nodes) is None

    def test_root_prefix_is_treated_as_key(
        self, resolver: PathResolver, graph: Graph
    ) -> None:
        assert resolver.resolve("root.user", graph.nodes) is None

    def test_first_match_wins(self, resolver: PathResolver) -> None:
        graph = GraphBuilder().build({"a.b": 1, "a": {"b": 2}})
        node = resolver.resolve("a.b", graph.nodes)
        assert node is not None
        assert node.label == "a.b: 1"

    def test_empty_node_set(self, resolver: PathResolver) -> None:
        assert resolver.resolve("a", []) is None

    def test_does_not_mutate_nodes(self, resolver: PathResolver, graph: Graph) -> None:
        before = graph.nodes
        resolver.resolve("items[1].name", graph.nodes)
        assert graph.nodes is before

    def test_surrounding_whitespace_ignored(
        self, resolver: PathResolver, graph: Graph
    ) -> None:
        node = resolver.resolve("  user \t", graph.nodes)
        assert node is not None
        assert node.id == "root.user"
        assert resolver.search(" user", graph.nodes).node is node

    def test_module_function(self, graph: Graph) -> None:
        node = resolve("user", graph.nodes)
        assert node is not None
        assert node.id == "root.user"


# ---------------------------------------------------------------------------
# search()
# ---------------------------------------------------------------------------


class TestSearch:
    def test_empty_query_is_noop(self, resolver: PathResolver, graph: Graph) -> None:
        result = resolver.search("", graph.nodes)
        assert result.status is SearchStatus.EMPTY
        assert result.message == ""
        assert result.node is None
        assert result.target is None

    def test_whitespace_query_is_noop(
        self, resolver: PathResolver, graph: Graph
    ) -> None:
        assert resolver.search("   ", graph.nodes).status is SearchStatus.EMPTY

    def test_empty_query_does_not_iterate_nodes(self, resolver: PathResolver) -> None:
        def explode():  # type: ignore[no-untyped-def]
            raise AssertionError("nodes were iterated")
            yield  # pragma: no cover

        assert resolver.search("", explode()).status is SearchStatus.EMPTY

    def test_match(self, resolver: PathResolver, graph: Graph) -> None:
        result = resolver.search("  items[0].id ", graph.nodes)
        assert result.status is SearchStatus.MATCH
        assert result.found
        assert result.query == "items[0].id"
        assert result.target == "root.items[0].id"
        assert result.node is not None
        assert result.node.id == "root.items[0].id"
        assert result.message == MATCH_FOUND == "Match found"

    def test_no_match(self, resolver: PathResolver, graph: Graph) -> None:
        result = resolver.search("user.email", graph.nodes)
        assert result.status is SearchStatus.NO_MATCH
        assert not result.found
        assert result.target == "root.user.email"
        assert result.message == NO_MATCH_FOUND == "No match found"

    def test_malformed(self, resolver: PathResolver, graph: Graph) -> None:
        result = resolver.search("items[a]", graph.nodes)
        assert result.status is SearchStatus.MALFORMED
        assert result.target is None
        assert result.node is None

    def test_malformed_and_no_match_share_message(
        self, resolver: PathResolver, graph: Graph
    ) -> None:
        malformed = resolver.search("items[a]", graph.nodes)
        missing = resolver.search("items[9]", graph.nodes)
        assert malformed.message == missing.message
