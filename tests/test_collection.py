import copy
import io
import json
import unittest

from planar_figures.collection import ArrayOfFigures, FigureView
from planar_figures.figures import Rectangle, Rhombus, Trapezoid
from planar_figures.geometry import Point


def make_rect():
    return Rectangle(Point(0, 0), Point(3, 4))  # area 12


def make_rhombus():
    return Rhombus(Point(0, 1), Point(-1, 0), Point(0, -1), Point(1, 0))  # area 2


def make_trap():
    return Trapezoid(Point(0, 0), Point(4, 0), Point(3, 2), Point(1, 2))  # area 6


class TestConstruction(unittest.TestCase):
    def test_capacity_rules(self):
        """No hint: no store; hint n: 2n slots, at least one."""
        self.assertEqual(ArrayOfFigures().get_capacity(), 0)
        self.assertEqual(ArrayOfFigures(0).get_capacity(), 1)
        self.assertEqual(ArrayOfFigures(1).get_capacity(), 2)
        self.assertEqual(ArrayOfFigures(3).get_capacity(), 6)
        for arr in (ArrayOfFigures(), ArrayOfFigures(0), ArrayOfFigures(3)):
            self.assertEqual(arr.get_size(), 0)
            self.assertEqual(len(arr), 0)
            self.assertEqual(arr.total_square(), 0.0)

    def test_bad_capacity(self):
        with self.assertRaises(ValueError):
            ArrayOfFigures(-1)
        with self.assertRaises(TypeError):
            ArrayOfFigures(2.5)

    def test_from_figures_clones(self):
        rect, rhomb = make_rect(), make_rhombus()
        arr = ArrayOfFigures.from_figures([rect, None, rhomb])
        self.assertEqual(arr.size, 3)
        self.assertEqual(arr.capacity, 6)
        self.assertIsNot(arr[0], rect)
        self.assertIsNone(arr[1])
        self.assertAlmostEqual(arr.total_square(), 14.0)
        with self.assertRaises(TypeError):
            ArrayOfFigures.from_figures([rect, "square"])

    def test_from_no_figures(self):
        arr = ArrayOfFigures.from_figures([])
        self.assertEqual(arr.size, 0)
        self.assertEqual(arr.capacity, 1)


class TestMutation(unittest.TestCase):
    def test_add_and_total(self):
        arr = ArrayOfFigures(5)
        rect = make_rect()
        arr.add_figure(rect)
        arr.add_figure(make_rhombus())
        self.assertEqual(arr.get_size(), 2)
        self.assertEqual(arr.get_capacity(), 10)
        # the stored object is the one handed in
        self.assertIs(arr[0], rect)
        self.assertIsInstance(arr[1], Rhombus)
        self.assertAlmostEqual(arr.total_square(), 14.0)

    def test_none_slots(self):
        arr = ArrayOfFigures(2)
        arr.add_figure(make_rect())
        arr.add_figure(None)
        arr.add_figure(make_rhombus())
        self.assertEqual(arr.size, 3)
        self.assertIsNone(arr[1])
        self.assertAlmostEqual(arr.total_square(), 14.0)
        self.assertIsNone(arr.at(1))

    def test_add_rejects_non_figures(self):
        arr = ArrayOfFigures()
        with self.assertRaises(TypeError):
            arr.add_figure(Point(1, 1))
        self.assertEqual(arr.size, 0)

    def test_growth(self):
        arr = ArrayOfFigures(1)
        for _ in range(3):
            arr.add_figure(make_rect())
        self.assertEqual(arr.get_size(), 3)
        self.assertEqual(arr.get_capacity(), 4)

        arr = ArrayOfFigures(0)
        for _ in range(3):
            arr.add_figure(make_rect())
        self.assertEqual(arr.get_capacity(), 4)  # 1 -> 2 -> 4

        arr = ArrayOfFigures(2)
        arr.add_figure(make_rect())
        self.assertEqual((arr.size, arr.capacity), (1, 4))

        arr = ArrayOfFigures()
        arr.add_figure(make_rect())
        self.assertEqual((arr.size, arr.capacity), (1, 1))

    def test_growth_keeps_figures(self):
        arr = ArrayOfFigures()
        figs = [make_rect() for _ in range(10)]
        with self.assertLogs("pf.collection", level="DEBUG") as cm:
            for f in figs:
                arr.add_figure(f)
        self.assertEqual(arr.capacity, 16)
        self.assertTrue(any("growing store" in line for line in cm.output))
        for i, f in enumerate(figs):
            self.assertIs(arr[i], f)
        self.assertAlmostEqual(arr.total_square(), 120.0)

    def test_setitem(self):
        arr = ArrayOfFigures.from_figures([make_rect()])
        arr[0] = make_trap()
        self.assertAlmostEqual(arr.total_square(), 6.0)
        arr[0] = None
        self.assertEqual(arr.total_square(), 0.0)
        with self.assertRaises(TypeError):
            arr[0] = "not a figure"
        with self.assertRaises(IndexError):
            arr[1] = make_rect()

    def test_remove_shifts_tail(self):
        rect, rhomb, trap = make_rect(), make_rhombus(), make_trap()
        arr = ArrayOfFigures(2)
        for f in (rect, rhomb, trap):
            arr.add_figure(f)
        arr.remove_figure(1)
        self.assertEqual(arr.size, 2)
        self.assertEqual(arr.capacity, 4)
        self.assertIs(arr[0], rect)
        self.assertIs(arr[1], trap)
        self.assertAlmostEqual(arr.total_square(), 18.0)
        with self.assertRaises(IndexError):
            arr[2]
        arr.remove_figure(1)
        arr.remove_figure(0)
        self.assertEqual(arr.size, 0)
        self.assertEqual(arr.total_square(), 0.0)

    def test_remove_out_of_range(self):
        arr = ArrayOfFigures.from_figures([make_rect(), make_rhombus()])
        for bad in (2, 5, -1):
            with self.assertRaises(IndexError):
                arr.remove_figure(bad)
        self.assertEqual(arr.size, 2)
        with self.assertRaises(IndexError):
            ArrayOfFigures().remove_figure(0)

    def test_same_figure_twice_rejected(self):
        """A stored figure cannot be stored again, in a new or another slot."""
        rhomb = make_rhombus()
        arr = ArrayOfFigures(2)
        arr.add_figure(rhomb)
        with self.assertRaises(ValueError):
            arr.add_figure(rhomb)
        self.assertEqual(arr.size, 1)
        arr.add_figure(make_rect())
        with self.assertRaises(ValueError):
            arr[1] = rhomb
        self.assertIsInstance(arr[1], Rectangle)
        # reassigning a figure to its own slot is fine
        arr[0] = rhomb
        self.assertIs(arr[0], rhomb)
        # None may appear any number of times
        arr.add_figure(None)
        arr.add_figure(None)
        self.assertEqual(arr.size, 4)


class TestIndexing(unittest.TestCase):
    def test_bounds(self):
        """Index == size is always out of range, as are negative indexes."""
        for n in range(6):
            arr = ArrayOfFigures()
            for _ in range(n):
                arr.add_figure(make_rhombus())
            with self.subTest(size=n):
                if n:
                    self.assertIsNotNone(arr[n - 1])
                with self.assertRaises(IndexError):
                    arr[n]
                with self.assertRaises(IndexError):
                    arr.at(n)
                with self.assertRaises(IndexError):
                    arr[-1]

    def test_iteration(self):
        rect = make_rect()
        arr = ArrayOfFigures(4)
        arr.add_figure(rect)
        arr.add_figure(None)
        self.assertEqual(list(arr), [rect, None])


class TestView(unittest.TestCase):
    def test_view_is_read_only(self):
        arr = ArrayOfFigures.from_figures([make_rect()])
        view = arr.at(0)
        self.assertIsInstance(view, FigureView)
        self.assertTrue(view.is_view_of(arr[0]))
        self.assertEqual(view.kind, "Rectangle")
        self.assertEqual(view.description, "rectangle")
        self.assertEqual(view.id, arr[0].id)
        self.assertAlmostEqual(view.square(), 12.0)
        self.assertAlmostEqual(view.perimeter(), 14.0)
        self.assertAlmostEqual(float(view), 12.0)
        self.assertEqual(view.geometric_center().get_point(), (1.5, 2.0))
        self.assertEqual(len(view.vertices), 4)
        self.assertEqual(str(view), str(arr[0]))
        self.assertFalse(hasattr(view, "read"))
        with self.assertRaises(AttributeError):
            view.description = "other"

    def test_view_clone(self):
        arr = ArrayOfFigures.from_figures([make_rhombus()])
        dup = arr.at(0).clone()
        self.assertIsNot(dup, arr[0])
        self.assertAlmostEqual(dup.square(), 2.0)
        with self.assertRaises(TypeError):
            FigureView(None)


class TestOwnership(unittest.TestCase):
    def setUp(self):
        self.src = ArrayOfFigures(1)
        self.src.add_figure(make_rect())
        self.src.add_figure(make_rhombus())

    def test_copy_is_deep(self):
        for dup in (self.src.copy(), copy.copy(self.src), copy.deepcopy(self.src)):
            self.assertEqual(dup.size, self.src.size)
            self.assertEqual(dup.capacity, self.src.capacity)
            self.assertAlmostEqual(dup.total_square(), 14.0)
            for i in range(dup.size):
                self.assertIsNot(dup[i], self.src[i])
                self.assertIs(type(dup[i]), type(self.src[i]))
        # changing the copy leaves the source alone
        dup = self.src.copy()
        dup.remove_figure(0)
        dup[0].read("(0,2) (-2,0) (0,-2) (2,0)")
        self.assertEqual(self.src.size, 2)
        self.assertAlmostEqual(self.src.total_square(), 14.0)

    def test_move(self):
        first = self.src[0]
        moved = self.src.move()
        self.assertEqual((moved.size, moved.capacity), (2, 2))
        self.assertIs(moved[0], first)
        self.assertAlmostEqual(moved.total_square(), 14.0)
        # the source is empty but still usable
        self.assertEqual((self.src.size, self.src.capacity), (0, 0))
        self.assertEqual(self.src.total_square(), 0.0)
        self.src.add_figure(make_trap())
        self.assertEqual((self.src.size, self.src.capacity), (1, 1))

    def test_copy_from(self):
        dst = ArrayOfFigures(3)
        dst.add_figure(make_trap())
        dst.copy_from(self.src)
        self.assertEqual((dst.size, dst.capacity), (2, 2))
        self.assertAlmostEqual(dst.total_square(), 14.0)
        self.assertIsNot(dst[0], self.src[0])
        self.assertEqual(self.src.size, 2)

    def test_copy_from_self(self):
        before = list(self.src)
        self.assertIs(self.src.copy_from(self.src), self.src)
        self.assertEqual(list(self.src), before)
        for a, b in zip(self.src, before):
            self.assertIs(a, b)

    def test_move_from(self):
        first = self.src[0]
        dst = ArrayOfFigures.from_figures([make_trap(), make_trap(), make_trap()])
        dst.move_from(self.src)
        self.assertEqual((dst.size, dst.capacity), (2, 2))
        self.assertIs(dst[0], first)
        self.assertAlmostEqual(dst.total_square(), 14.0)
        self.assertEqual((self.src.size, self.src.capacity), (0, 0))

    def test_move_from_self(self):
        self.src.move_from(self.src)
        self.assertEqual(self.src.size, 2)
        self.assertAlmostEqual(self.src.total_square(), 14.0)

    def test_copies_clone_each_slot(self):
        """copy, copy.copy and copy.deepcopy give every slot its own figure."""
        arr = ArrayOfFigures.from_figures([make_rhombus(), make_rhombus()])
        for dup in (arr.copy(), copy.copy(arr), copy.deepcopy(arr)):
            self.assertIsNot(dup[0], dup[1])
            self.assertTrue(dup[0].read("(0,2) (-2,0) (0,-2) (2,0)"))
            self.assertAlmostEqual(dup.total_square(), 10.0)
        self.assertAlmostEqual(arr.total_square(), 4.0)

    def test_swap_and_release(self):
        other = ArrayOfFigures.from_figures([make_trap()])
        self.src.swap(other)
        self.assertEqual(self.src.size, 1)
        self.assertEqual(other.size, 2)
        with self.assertRaises(TypeError):
            self.src.swap([])
        other.release()
        self.assertEqual((other.size, other.capacity), (0, 0))
        other.add_figure(make_rect())
        self.assertEqual(other.size, 1)


class TestOutput(unittest.TestCase):
    def test_print_figures(self):
        arr = ArrayOfFigures(2)
        arr.add_figure(make_rect())
        arr.add_figure(None)
        arr.add_figure(make_rhombus())
        buf = io.StringIO()
        arr.print_figures(buf)
        expected = (
            "rectangle:\n(0, 0)\n(3, 0)\n(3, 4)\n(0, 4)\n"
            "rhombus:\n(0, 1)\n(-1, 0)\n(0, -1)\n(1, 0)\n"
        )
        self.assertEqual(buf.getvalue(), expected)
        self.assertEqual(str(arr), expected)
        self.assertEqual(str(ArrayOfFigures()), "")

    def test_repr(self):
        arr = ArrayOfFigures(2)
        self.assertEqual(repr(arr), "<pf.collection.ArrayOfFigures size=0 capacity=4>")


class TestSerialization(unittest.TestCase):
    def test_round_trip(self):
        arr = ArrayOfFigures(2)
        arr.add_figure(make_rect())
        arr.add_figure(None)
        arr.add_figure(make_trap())
        d = arr.to_dict()
        self.assertEqual(d["__type__"], "ArrayOfFigures")
        self.assertEqual(d["capacity"], 4)
        self.assertIsNone(d["figures"][1])
        back = ArrayOfFigures.from_json(json.dumps(d))
        self.assertEqual((back.size, back.capacity), (3, 4))
        self.assertIsInstance(back[0], Rectangle)
        self.assertIsNone(back[1])
        self.assertIsInstance(back[2], Trapezoid)
        self.assertEqual(back[2].id, arr[2].id)
        self.assertAlmostEqual(back.total_square(), 18.0)
        # the restored array grows like any other
        back.add_figure(make_rhombus())
        back.add_figure(make_rhombus())
        self.assertEqual((back.size, back.capacity), (5, 8))

    def test_round_trip_with_unset_figure(self):
        """Placeholder figures come back as placeholders."""
        arr = ArrayOfFigures()
        arr.add_figure(Rhombus())
        arr.add_figure(make_rect())
        back = ArrayOfFigures.from_dict(arr.to_dict())
        self.assertEqual(back.size, 2)
        self.assertIsInstance(back[0], Rhombus)
        self.assertEqual(back[0].square(), 0.0)
        self.assertEqual(back[0].description, "rhombus")
        self.assertAlmostEqual(back.total_square(), 12.0)
        # the restored placeholder still accepts a read
        self.assertTrue(back[0].read("(0,1) (-1,0) (0,-1) (1,0)"))
        self.assertAlmostEqual(back.total_square(), 14.0)


if __name__ == "__main__":
    unittest.main()
