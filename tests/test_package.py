import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import graphcaps
from graphcaps.core.errors import GraphError, InvalidHandleError, InvalidIdError


class TestTopLevelExports(unittest.TestCase):
    def test_lazy_symbols_resolve(self):
        for name in graphcaps._lazy_symbols:
            if name in ("from_nx", "to_nx"):
                continue  # optional networkx dependency
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(graphcaps, name))

    def test_lazy_submodules(self):
        self.assertIs(graphcaps.core.FiniteGraph, graphcaps.FiniteGraph)
        self.assertIs(graphcaps.storage.IncidenceGraph, graphcaps.IncidenceGraph)

    def test_unknown_attribute(self):
        with self.assertRaises(AttributeError):
            graphcaps.does_not_exist

    def test_dir_lists_exports(self):
        self.assertIn("reverse", dir(graphcaps))
        self.assertIsInstance(graphcaps.__version__, str)

    def test_star_reverse_from_top_level(self):
        g = graphcaps.star(4)
        r = graphcaps.reverse(g)
        self.assertEqual(r.in_degree(g.id2node(0)), 4)


class TestErrors(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(InvalidHandleError, KeyError))
        self.assertTrue(issubclass(InvalidIdError, IndexError))
        for exc in (InvalidHandleError, InvalidIdError):
            self.assertTrue(issubclass(exc, GraphError))

    def test_messages(self):
        err = InvalidHandleError("node", 7)
        self.assertEqual(str(err), "node handle 7 does not belong to this graph")
        self.assertEqual((err.kind, err.handle), ("node", 7))
        err = InvalidIdError("edge", 5, 3)
        self.assertEqual(str(err), "edge id 5 out of range [0, 3)")
        self.assertEqual(err.count, 3)


if __name__ == "__main__":
    unittest.main()
