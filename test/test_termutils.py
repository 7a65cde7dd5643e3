# -*- coding: utf-8 -*-
import unittest

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import XSD

from rdflib_dataobjects.constants import NO_VALUE
from rdflib_dataobjects.termutils import serialize, term_identifier, unserialize


PREFIXES = {
    "ex": "http://example.org/",
    "foaf": "http://xmlns.com/foaf/0.1/",
}


class TermUtilsTestCase(unittest.TestCase):

    terms = [
        URIRef("http://example.org/Alice"),
        URIRef("http://xmlns.com/foaf/0.1/name"),
        URIRef("urn:isbn:0451450523"),
        BNode("b0"),
        Literal("Alice"),
        Literal("chat", lang="fr"),
        Literal(42),
        Literal("2024-01-01", datatype=XSD.date),
        Literal(u"les garçons à Noël"),
        Literal(u'He said "hi"'),
    ]

    def test_round_trip(self):
        for term in self.terms:
            self.assertEqual(unserialize(serialize(term)), term, term)

    def test_round_trip_with_prefixes(self):
        for term in self.terms:
            self.assertEqual(
                unserialize(serialize(term, PREFIXES), PREFIXES), term, term)

    def test_prefixed_uri(self):
        self.assertEqual(serialize(URIRef("http://example.org/Alice"), PREFIXES), "ex:Alice")
        self.assertEqual(unserialize("ex:Alice", PREFIXES), URIRef("http://example.org/Alice"))

    def test_unprefixed_uri(self):
        self.assertEqual(
            serialize(URIRef("http://example.com/Alice"), PREFIXES),
            "<http://example.com/Alice>")

    def test_first_matching_prefix_wins(self):
        prefixes = {"ex": "http://example.org/", "people": "http://example.org/people/"}
        self.assertEqual(
            serialize(URIRef("http://example.org/people/bob"), prefixes), "ex:people/bob")

    def test_literals_are_not_prefixed(self):
        literal = Literal("http://example.org/Alice")
        self.assertEqual(serialize(literal, PREFIXES), '"http://example.org/Alice"')

    def test_absent_value(self):
        self.assertEqual(serialize(None), NO_VALUE)
        self.assertIsNone(unserialize(NO_VALUE))
        self.assertIsNone(unserialize(NO_VALUE, PREFIXES))

    def test_absent_value_does_not_collide(self):
        for term in [URIRef("nil"), Literal("nil")]:
            cell = serialize(term)
            self.assertNotEqual(cell, NO_VALUE)
            self.assertEqual(unserialize(cell), term)

    def test_graph_is_stored_by_identifier(self):
        graph = Graph(identifier=URIRef("http://example.org/g"))
        self.assertEqual(term_identifier(graph), URIRef("http://example.org/g"))
        self.assertEqual(serialize(graph, PREFIXES), "ex:g")

    def test_blank_node_prefix_collision(self):
        # a prefix labelled "_" captures blank node cells
        prefixes = {"_": "http://example.org/"}
        cell = serialize(BNode("b0"), prefixes)
        self.assertEqual(cell, "_:b0")
        self.assertEqual(unserialize(cell, prefixes), URIRef("http://example.org/b0"))


if __name__ == "__main__":
    unittest.main()
