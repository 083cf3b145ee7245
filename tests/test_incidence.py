import os
import sys
import unittest

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from graphcaps.core.errors import GraphError, InvalidHandleError, InvalidIdError
from graphcaps.core.refs import DirectedRef, FiniteDigraphRef, UndirectedRef
from graphcaps.core.traits import Directed, FiniteDigraph, FiniteGraph, IndexGraph, Undirected
from graphcaps.storage.incidence import DirEdge, Edge, IncidenceGraph, Node


def _build():
    """a -> b, a -> c, b -> c, c -> a, plus a self-loop at b."""
    b = IncidenceGraph.new_builder()
    na, nb, nc = b.add_nodes(3)
    edges = [
        b.add_edge(na, nb),
        b.add_edge(na, nc),
        b.add_edge(nb, nc),
        b.add_edge(nc, na),
        b.add_edge(nb, nb),
    ]
    return b.into_graph(), (na, nb, nc), edges


class TestIncidenceGraph(unittest.TestCase):
    def setUp(self):
        self.g, self.nodes, self.edges = _build()

    def test_capabilities(self):
        for cap in (FiniteGraph, FiniteDigraph, Directed, Undirected, IndexGraph,
                    FiniteDigraphRef, DirectedRef, UndirectedRef):
            self.assertIsInstance(self.g, cap)

    def test_counts_and_enumeration(self):
        g = self.g
        self.assertEqual(g.num_nodes(), 3)
        self.assertEqual(g.num_edges(), 5)
        self.assertEqual(list(g.nodes()), list(self.nodes))
        self.assertEqual(list(g.edges()), self.edges)
        self.assertIn("V=3", repr(g))

    def test_endpoints(self):
        g = self.g
        na, nb, nc = self.nodes
        e_ab, e_ac, e_bc, e_ca, e_bb = self.edges
        self.assertEqual((g.src(e_ca), g.snk(e_ca)), (nc, na))
        self.assertEqual(g.enodes(e_bc), (nb, nc))
        self.assertEqual(g.enodes(e_bb), (nb, nb))
        for e in g.edges():
            self.assertEqual(g.enodes(e), (g.src(e), g.snk(e)))

    def test_out_and_in_edges(self):
        g = self.g
        na, nb, nc = self.nodes
        e_ab, e_ac, e_bc, e_ca, e_bb = self.edges
        self.assertEqual(list(g.outedges(na)), [(e_ab, nb), (e_ac, nc)])
        self.assertEqual(list(g.inedges(na)), [(e_ca, nc)])
        self.assertEqual(list(g.outedges(nb)), [(e_bc, nc), (e_bb, nb)])
        self.assertEqual(list(g.inedges(nb)), [(e_ab, na), (e_bb, nb)])
        self.assertEqual(list(g.outgoing(na)), [nb, nc])
        self.assertEqual(list(g.incoming(nc)), [na, nb])
        self.assertEqual(g.out_degree(nb), 2)
        self.assertEqual(g.in_degree(nc), 2)

    def test_incident_edges_orientation(self):
        g = self.g
        na, nb, nc = self.nodes
        e_ab, e_ac, e_bc, e_ca, e_bb = self.edges
        incident = list(g.incident_edges(na))
        self.assertEqual(
            incident,
            [(DirEdge(0, True), nb), (DirEdge(1, True), nc), (DirEdge(3, False), nc)],
        )
        for d, _ in incident:
            self.assertNotEqual(d.is_outgoing(), d.is_incoming())
        self.assertEqual(incident[2][0].edge(), e_ca)

    def test_self_loop_policy(self):
        g = self.g
        na, nb, nc = self.nodes
        e_ab, e_ac, e_bc, e_ca, e_bb = self.edges
        # incident: the loop shows up once per orientation
        loops = [(d.is_outgoing(), v) for d, v in g.incident_edges(nb) if d.edge() == e_bb]
        self.assertEqual(sorted(loops), [(False, nb), (True, nb)])
        # undirected neighbors: the loop shows up once
        neighs = list(g.neighs(nb))
        self.assertEqual(neighs, [(e_bc, nc), (e_bb, nb), (e_ab, na)])
        self.assertEqual(sorted(v.index for v in g.neighbors(nb)), [0, 1, 2])
        self.assertEqual(g.degree(nb), 3)

    def test_id_bijection(self):
        g = self.g
        self.assertEqual([g.node_id(u) for u in g.nodes()], list(range(g.num_nodes())))
        self.assertEqual([g.edge_id(e) for e in g.edges()], list(range(g.num_edges())))
        for i in range(g.num_nodes()):
            self.assertEqual(g.node_id(g.id2node(i)), i)
        for e in g.edges():
            self.assertEqual(g.id2edge(g.edge_id(e)), e)

    def test_handles_are_typed(self):
        self.assertNotEqual(Node(0), Edge(0))
        self.assertEqual(len({Node(1), Node(1), Edge(1)}), 2)


class TestPreconditions(unittest.TestCase):
    def setUp(self):
        self.g, _, _ = _build()

    def test_invalid_handles(self):
        g = self.g
        with self.assertRaises(InvalidHandleError):
            g.src(Edge(99))
        with self.assertRaises(InvalidHandleError):
            g.out_iter(Node(3))
        with self.assertRaises(InvalidHandleError):
            g.node_id(Edge(0))
        with self.assertRaises(KeyError):
            g.edge_id(Node(0))

    def test_invalid_ids(self):
        g = self.g
        with self.assertRaises(InvalidIdError):
            g.id2node(3)
        with self.assertRaises(IndexError):
            g.id2edge(-1)
        with self.assertRaises(GraphError):
            g.id2edge(5)

    def test_builder_rejects_foreign_nodes(self):
        b = IncidenceGraph.new_builder()
        u = b.add_node()
        with self.assertRaises(InvalidHandleError):
            b.add_edge(u, Node(1))
        with self.assertRaises(ValueError):
            b.add_nodes(-1)

    def test_constructor_validation(self):
        with self.assertRaises(ValueError):
            IncidenceGraph(2, [0, 1], [1])
        with self.assertRaises(ValueError):
            IncidenceGraph.from_edges(2, [(0, 2)])
        with self.assertRaises(ValueError):
            IncidenceGraph(-1, [], [])

    def test_endpoints_must_be_integers(self):
        with self.assertRaises(ValueError):
            IncidenceGraph(3, [0, 1.7], [1, 2])
        with self.assertRaises(ValueError):
            IncidenceGraph(3, np.array([0.0, 1.0]), np.array([1, 2]))
        g = IncidenceGraph(3, np.array([0, 1], dtype=np.uint8), [1, 2])
        self.assertEqual(g.snk(Edge(1)), Node(2))


class TestEmptyGraph(unittest.TestCase):
    def test_empty(self):
        g = IncidenceGraph.new_builder().into_graph()
        self.assertEqual((g.num_nodes(), g.num_edges()), (0, 0))
        self.assertEqual(list(g.nodes()), [])
        self.assertEqual(g.edges_iter().count(g), 0)

    def test_isolated_nodes(self):
        g = IncidenceGraph(4, [], [])
        u = g.id2node(2)
        self.assertEqual(list(g.outedges(u)), [])
        self.assertEqual(list(g.neighs(u)), [])
        self.assertEqual(g.incident_iter(u).size_hint(g), (0, 0))


if __name__ == "__main__":
    unittest.main()
