import os
import sys
import unittest
from collections import Counter

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from graphcaps.adapters.reverse import (
    ReverseDigraph,
    ReverseDirectedEdge,
    ReverseIncidentIt,
    ReverseWrapIt,
    reverse,
)
from graphcaps.core.errors import InvalidHandleError, InvalidIdError
from graphcaps.core.refs import DirectedRef, FiniteDigraphRef, FiniteGraphRef, UndirectedRef
from graphcaps.core.traits import Directed, FiniteDigraph, FiniteGraph, IndexGraph, Undirected
from graphcaps.generators import complete_bipartite, complete_graph, cycle, star
from graphcaps.storage.incidence import DirEdge, IncidenceGraph


def _graphs():
    return {
        "star": star(42),
        "cycle": cycle(5),
        "loop": cycle(1),
        "complete": complete_graph(5),
        "bipartite": complete_bipartite(2, 3),
        "multi": IncidenceGraph.from_edges(
            4, [(0, 1), (0, 1), (1, 0), (2, 2), (2, 3), (3, 2), (3, 3), (1, 3)]
        ),
        "empty": IncidenceGraph(0, [], []),
    }


def _incident(g, u):
    return Counter((d.edge(), v, d.is_outgoing()) for d, v in g.incident_edges(u))


class TestReverseProperties(unittest.TestCase):
    def test_counts(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                self.assertEqual(r.num_nodes(), g.num_nodes())
                self.assertEqual(r.num_edges(), g.num_edges())
                self.assertEqual(list(r.nodes()), list(g.nodes()))
                self.assertEqual(list(r.edges()), list(g.edges()))

    def test_src_snk_swapped(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                for e in g.edges():
                    self.assertEqual(r.src(e), g.snk(e))
                    self.assertEqual(r.snk(e), g.src(e))
                    self.assertEqual(r.enodes(e), g.enodes(e))

    def test_out_in_swapped(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                for u in g.nodes():
                    self.assertEqual(Counter(r.outedges(u)), Counter(g.inedges(u)))
                    self.assertEqual(Counter(r.inedges(u)), Counter(g.outedges(u)))
                    self.assertEqual(r.out_degree(u), g.in_degree(u))
                    self.assertEqual(r.in_degree(u), g.out_degree(u))

    def test_context_iterators_swapped(self):
        g = _graphs()["multi"]
        r = reverse(g)
        for u in g.nodes():
            out_r = r.out_iter(u)
            self.assertIsInstance(out_r, ReverseWrapIt)
            self.assertEqual(out_r.size_hint(r), g.in_iter(u).size_hint(g))
            self.assertEqual(list(out_r.iter(r)), list(g.in_iter(u).iter(g)))
            self.assertEqual(r.in_iter(u).count(r), g.out_iter(u).count(g))

    def test_incident_flags_inverted(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                for u in g.nodes():
                    flipped = Counter({(e, v, not out): n for (e, v, out), n in _incident(g, u).items()})
                    self.assertEqual(_incident(r, u), flipped)
                    for d, _ in r.incident_edges(u):
                        self.assertIsInstance(d, ReverseDirectedEdge)
                        self.assertNotEqual(d.is_outgoing(), d.is_incoming())

    def test_incident_iter_wrapper(self):
        g = star(3)
        r = reverse(g)
        center = g.id2node(0)
        it = r.incident_iter(center)
        self.assertIsInstance(it, ReverseIncidentIt)
        self.assertEqual(it.size_hint(r), (3, 3))
        d, v = it.next(r)
        self.assertTrue(d.is_incoming())
        self.assertEqual(d.inner, DirEdge(0, True))
        self.assertEqual(v, g.id2node(1))
        self.assertEqual(it.count(r), 2)
        self.assertIsNone(it.next(r))

    def test_neighbors_unchanged(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                for u in g.nodes():
                    self.assertEqual(list(r.neighs(u)), list(g.neighs(u)))
                    self.assertEqual(r.neigh_iter(u).count(r), g.neigh_iter(u).count(g))

    def test_ids_unchanged(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                r = reverse(g)
                for u in g.nodes():
                    self.assertEqual(r.node_id(u), g.node_id(u))
                    self.assertEqual(r.id2node(g.node_id(u)), u)
                for e in g.edges():
                    self.assertEqual(r.edge_id(e), g.edge_id(e))
                    self.assertEqual(r.id2edge(g.edge_id(e)), e)

    def test_double_reversal(self):
        for name, g in _graphs().items():
            with self.subTest(graph=name):
                rr = reverse(reverse(g))
                self.assertEqual(rr.num_nodes(), g.num_nodes())
                self.assertEqual(list(rr.edges()), list(g.edges()))
                for e in g.edges():
                    self.assertEqual((rr.src(e), rr.snk(e)), (g.src(e), g.snk(e)))
                for u in g.nodes():
                    self.assertEqual(list(rr.outedges(u)), list(g.outedges(u)))
                    self.assertEqual(list(rr.inedges(u)), list(g.inedges(u)))
                    self.assertEqual(_incident(rr, u), _incident(g, u))
                    self.assertEqual(list(rr.neighs(u)), list(g.neighs(u)))

    def test_star_scenario(self):
        g = star(42)
        center = g.id2node(0)
        self.assertEqual((g.num_nodes(), g.num_edges()), (43, 42))
        self.assertEqual(g.out_iter(center).count(g), 42)
        self.assertEqual(g.in_iter(center).count(g), 0)
        self.assertTrue(all(g.node_id(g.src(e)) == 0 and g.node_id(g.snk(e)) > 0 for e in g.edges()))

        r = reverse(g)
        self.assertEqual((r.num_nodes(), r.num_edges()), (43, 42))
        self.assertEqual(r.out_iter(center).count(r), 0)
        self.assertEqual(r.in_iter(center).count(r), 42)
        self.assertTrue(all(r.node_id(r.snk(e)) == 0 and r.node_id(r.src(e)) > 0 for e in r.edges()))
        self.assertTrue(all(r.node_id(v) > 0 for _, v in r.inedges(center)))


class TestReverseView(unittest.TestCase):
    def test_capabilities_match_inner(self):
        r = reverse(star(2))
        self.assertIsInstance(r, ReverseDigraph)
        for cap in (FiniteGraph, FiniteDigraph, Directed, Undirected, IndexGraph):
            self.assertIsInstance(r, cap)

    def test_view_class_is_cached(self):
        self.assertIs(type(reverse(star(1))), type(reverse(cycle(3))))
        self.assertIs(type(ReverseDigraph(star(1))), type(reverse(star(1))))

    def test_no_copy(self):
        g = star(3)
        r = reverse(g)
        self.assertIs(r.inner, g)
        self.assertIs(reverse(r).inner, r)

    def test_errors_propagate(self):
        r = reverse(star(3))
        with self.assertRaises(InvalidIdError):
            r.id2node(10)
        with self.assertRaises(InvalidHandleError):
            r.out_iter("not a node")

    def test_rejects_non_directed(self):
        with self.assertRaises(TypeError):
            reverse(object())

        class OnlyNeighbors(UndirectedRef):
            def neighs(self, u):
                return iter(())

        with self.assertRaises(TypeError):
            reverse(OnlyNeighbors())

    def test_directed_edge_equality(self):
        a = ReverseDirectedEdge(DirEdge(1, True))
        self.assertEqual(a, ReverseDirectedEdge(DirEdge(1, True)))
        self.assertNotEqual(a, ReverseDirectedEdge(DirEdge(1, False)))
        self.assertNotEqual(a, DirEdge(1, False))
        self.assertEqual(len({a, ReverseDirectedEdge(DirEdge(1, True))}), 1)


class _Arcs(DirectedRef):
    """Reference-style directed graph with nothing but arc lookups."""

    def __init__(self, arcs):
        self.arcs = arcs

    def outedges(self, u):
        return ((i, v) for i, (s, v) in enumerate(self.arcs) if s == u)

    def inedges(self, u):
        return ((i, s) for i, (s, v) in enumerate(self.arcs) if v == u)

    def incident_edges(self, u):
        raise NotImplementedError


class TestReverseCapabilitySubset(unittest.TestCase):
    def test_directed_only(self):
        g = _Arcs([("a", "b"), ("b", "c"), ("a", "c")])
        r = reverse(g)
        self.assertIsInstance(r, DirectedRef)
        for cap in (FiniteGraphRef, FiniteDigraphRef, UndirectedRef, IndexGraph, Directed):
            self.assertNotIsInstance(r, cap)
        self.assertFalse(hasattr(r, "num_nodes"))
        self.assertEqual(list(r.outedges("c")), [(1, "b"), (2, "a")])
        self.assertEqual(list(r.incoming("a")), ["b", "c"])
        self.assertEqual(r.out_degree("a"), 0)


if __name__ == "__main__":
    unittest.main()
