import unittest
from pathlib import Path
import sys
sys.path.append(str(Path(__file__).parent.parent / 'src'))

from bltree.errors import ContractViolation
from bltree.tree import Tree


def leaf(label):
    t = Tree()
    t.assemble(label, t.new_sequence_of_tree())
    return t


def node(label, *children):
    t = Tree()
    t.assemble(label, list(children))
    return t


class TestTree(unittest.TestCase):
    def test_new_tree_is_empty(self):
        t = Tree()
        self.assertTrue(t.is_empty())
        self.assertEqual(t.number_of_subtrees(), 0)
        self.assertEqual(t.size(), 0)
        self.assertEqual(str(t), "()")

    def test_assemble_consumes_children(self):
        a, b = leaf("a"), leaf("b")
        children = [a, b]
        t = Tree()
        t.assemble("r", children)
        self.assertEqual(children, [])
        self.assertEqual(t.root(), "r")
        self.assertEqual(t.number_of_subtrees(), 2)
        self.assertEqual(str(t), "r(a,b)")
        self.assertEqual(t.size(), 3)
        self.assertEqual(t.height(), 2)

    def test_assemble_rejects_self_and_duplicates(self):
        t = leaf("r")
        with self.assertRaises(ContractViolation):
            t.assemble("x", [t])
        a = leaf("a")
        with self.assertRaises(ContractViolation):
            Tree().assemble("x", [a, a])

    def test_disassemble_moves_children_out(self):
        t = node("r", leaf("a"), node("b", leaf("c")))
        out = [leaf("stale")]
        label = t.disassemble(out)
        self.assertEqual(label, "r")
        self.assertTrue(t.is_empty())
        self.assertEqual([str(c) for c in out], ["a", "b(c)"])

    def test_disassemble_empty_tree_fails(self):
        with self.assertRaises(ContractViolation):
            Tree().disassemble([])

    def test_root_of_empty_tree_fails(self):
        with self.assertRaises(ContractViolation):
            Tree().root()

    def test_remove_and_add_subtree(self):
        t = node("r", leaf("a"), leaf("b"), leaf("c"))
        removed = t.remove_subtree(1)
        self.assertEqual(str(removed), "b")
        self.assertEqual(str(t), "r(a,c)")
        t.add_subtree(0, removed)
        self.assertTrue(removed.is_empty())
        self.assertEqual(str(t), "r(b,a,c)")

    def test_subtree_positions_are_checked(self):
        t = node("r", leaf("a"))
        with self.assertRaises(ContractViolation):
            t.remove_subtree(1)
        with self.assertRaises(ContractViolation):
            t.remove_subtree(-1)
        with self.assertRaises(ContractViolation):
            t.add_subtree(2, leaf("x"))

    def test_non_integer_positions_are_rejected(self):
        t = node("r", leaf("a"))
        x = leaf("x")
        with self.assertRaises(ContractViolation):
            t.add_subtree(0.5, x)
        self.assertEqual(str(x), "x")
        with self.assertRaises(ContractViolation):
            t.remove_subtree("0")
        self.assertEqual(str(t), "r(a)")

    def test_transfer_from(self):
        src = node("r", leaf("a"))
        dst = leaf("old")
        dst.transfer_from(src)
        self.assertEqual(str(dst), "r(a)")
        self.assertTrue(src.is_empty())
        with self.assertRaises(ContractViolation):
            dst.transfer_from(dst)

    def test_structural_equality(self):
        self.assertEqual(node("r", leaf("a")), node("r", leaf("a")))
        self.assertNotEqual(node("r", leaf("a")), node("r", leaf("b")))
        self.assertNotEqual(node("r", leaf("a")), node("r"))
        self.assertEqual(Tree(), Tree())
        with self.assertRaises(TypeError):
            hash(Tree())


if __name__ == '__main__':
    unittest.main()
