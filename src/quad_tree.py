from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from geometry import Point, Rectangle, as_point, as_rectangle


DEFAULT_MAX_DEPTH = 128


@dataclass
class RegionNode:
    """Κόμβος ενός point quad-tree σε 2D.
Φύλλο όταν δεν έχει παιδιά (κρατάει το πολύ ένα σημείο), αλλιώς έχει ακριβώς 4 παιδιά (NE, NW, SW, SE)."""

    bounds: Rectangle                                   #orthogonio kouti pou kaliptei auto to node
    depth: int = 0                                      #apostasi apo ti riza
    data: Optional[Point] = None                        #mono se fillo
    children: Optional[Tuple["RegionNode", ...]] = None

    def is_leaf(self) -> bool:
        "Επιστρέφει True αν ο κόμβος δεν έχει παιδιά."
        return self.children is None

    def child_for(self, point: Point) -> Optional["RegionNode"]:
        "Επιστρέφει το πρώτο παιδί (NE, NW, SW, SE) που περιέχει το σημείο."
        for child in self.children:
            if child.bounds.contains(point):
                return child
        return None

    def subdivide(self) -> bool:
        "Χωρίζει το φύλλο σε 4 άδεια παιδιά. Επιστρέφει False αν έχει ήδη χωριστεί."
        if not self.is_leaf():
            return False

        self.children = tuple(
            RegionNode(bounds=quad, depth=self.depth + 1) for quad in self.bounds.quadrants()
        )
        return True


def _quadrant_of(quads: Tuple[Rectangle, ...], point: Point) -> Optional[int]:
    for i, quad in enumerate(quads):
        if quad.contains(point):
            return i
    return None


class QuadTree:
    "Point Quad-Tree πάνω σε σταθερή ορθογώνια περιοχή, με το πολύ ένα σημείο ανά φύλλο."

    def __init__(self, bounds: Rectangle, max_depth: int = DEFAULT_MAX_DEPTH):
        "Αρχικοποιεί άδειο Quad-Tree για τα σημεία μέσα στα bounds."
        bounds = as_rectangle(bounds)
        if bounds is None:
            raise ValueError("QuadTree needs bounds")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        self.max_depth = max_depth
        self.root = RegionNode(bounds=bounds)
        self._size = 0

    @property
    def bounds(self) -> Rectangle:
        return self.root.bounds

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        "Επιστρέφει πόσα σημεία περιέχει το δέντρο."
        return self._size

    def is_empty(self) -> bool:
        "Επιστρέφει True αν το δέντρο είναι άδειο."
        return self._size == 0

    def __contains__(self, point) -> bool:
        return self.contains(point)

    #insertion
    def insert(self, point) -> bool:
        """Εισάγει ένα σημείο στο quad-tree.
Επιστρέφει False (χωρίς καμία αλλαγή) για None, σημείο εκτός ορίων ή διπλότυπο."""
        point = as_point(point)
        if point is None or not self.root.bounds.contains(point):
            return False

        return self._insert_node(self.root, point)

    def _insert_node(self, node: RegionNode, point: Point) -> bool:
        "Αναδρομική εισαγωγή σε υποδέντρα."
        if not node.is_leaf():
            child = node.child_for(point)
            if child is None:
                return False
            return self._insert_node(child, point)

        #adeio fillo -> to vazoume edo
        if node.data is None:
            node.data = point
            self._size += 1
            return True

        if node.data == point:
            return False  #no duplicates

        #prin to subdivision elegxoume oti ta 2 simeia xorizoun prin to max_depth
        if not self._can_separate(node, node.data, point):
            return False

        displaced = node.data
        node.data = None
        node.subdivide()

        #to palio simeio paei sto swsto paidi, den to xanoume
        node.child_for(displaced).data = displaced
        return self._insert_node(node.child_for(point), point)

    def _can_separate(self, node: RegionNode, a: Point, b: Point) -> bool:
        "Ελέγχει αν διαδοχικά subdivisions βάζουν τα a, b σε διαφορετικά φύλλα εντός max_depth."
        bounds = node.bounds
        depth = node.depth

        while depth < self.max_depth:
            quads = bounds.quadrants()
            qa = _quadrant_of(quads, a)
            qb = _quadrant_of(quads, b)
            if qa is None or qb is None:
                return False
            if qa != qb:
                return True

            #kai ta 2 sto idio tetartimorio -> tha xreiastei ki allo subdivision
            bounds = quads[qa]
            depth += 1

        return False

    #lookup
    def contains(self, point) -> bool:
        "Ελέγχει αν το σημείο είναι αποθηκευμένο στο δέντρο (ακριβής ισότητα)."
        point = as_point(point)
        if point is None or self.is_empty() or not self.root.bounds.contains(point):
            return False

        return self._find_node(self.root, point)

    def _find_node(self, node: Optional[RegionNode], point: Point) -> bool:
        "Αναδρομική αναζήτηση μόνο στο παιδί που περιέχει το σημείο."
        if node is None:
            return False

        if node.is_leaf():
            return node.data == point

        return self._find_node(node.child_for(point), point)

    #range query
    def query(self, rect) -> List[Point]:
        "Επιστρέφει τα σημεία εντός του ορθογωνίου rect."
        rect = as_rectangle(rect)
        results: List[Point] = []
        if rect is None or self.is_empty():
            return results

        self._query_node(self.root, rect, results)
        return results

    def _query_node(self, node: RegionNode, rect: Rectangle, results: List[Point]) -> None:
        "Αναδρομική συνάρτηση για range query."
        #an to rect den temnei to node.bounds tote kanoume ignore to subtree
        if not node.bounds.intersects(rect):
            return

        if node.is_leaf():
            #adeio fillo den prosferei tipota
            if node.data is not None and rect.contains(node.data):
                results.append(node.data)
            return

        for child in node.children:
            self._query_node(child, rect, results)

    #gia visualization
    def boundaries(self) -> Iterator[Rectangle]:
        "Επιστρέφει τα bounds κάθε κόμβου σε pre-order (ο γονέας πριν τα παιδιά)."
        return self._iter_nodes(self.root, lambda node: node.bounds)

    def points(self) -> List[Point]:
        "Επιστρέφει όλα τα αποθηκευμένα σημεία."
        return [p for p in self._iter_nodes(self.root, lambda node: node.data) if p is not None]

    def height(self) -> int:
        "Επιστρέφει το βάθος του βαθύτερου κόμβου (0 για δέντρο χωρίς subdivisions)."
        return max(self._iter_nodes(self.root, lambda node: node.depth))

    def _iter_nodes(self, node: RegionNode, key):
        yield key(node)
        if node.is_leaf():
            return
        for child in node.children:
            yield from self._iter_nodes(child, key)
