import unittest
from pathlib import Path
import sys
sys.path.append(str(Path(__file__).parent.parent / 'src'))

from bltree.condition import Condition
from bltree.errors import ContractViolation
from bltree.program import Program
from bltree.statement import Kind, Statement


def block_of_calls(*names):
    b = Statement()
    for name in names:
        c = Statement()
        c.assemble_call(name)
        b.add_to_block(b.length_of_block(), c)
    return b


class TestProgram(unittest.TestCase):
    def setUp(self):
        self.program = Program()

    def test_constructor(self):
        self.assertEqual(self.program.name(), "Unnamed")
        body = self.program.new_body()
        self.program.swap_body(body)
        self.assertEqual(body, Statement())
        context = self.program.new_context()
        self.program.swap_context(context)
        self.assertEqual(context, {})
        self.assertEqual(self.program, Program())

    def test_set_name(self):
        self.program.set_name("Test")
        self.assertEqual(self.program.name(), "Test")

    def test_set_name_requires_identifier(self):
        for bad in ["", "1st", "PROGRAM", "has space"]:
            with self.assertRaises(ContractViolation):
                self.program.set_name(bad)
        self.assertEqual(self.program.name(), "Unnamed")

    def test_swap_context(self):
        context = self.program.new_context()
        context["one"] = block_of_calls("move")
        context["two"] = block_of_calls("turnleft", "move")
        self.program.swap_context(context)
        self.assertEqual(context, {})

        # Take "one" back out, leaving only "two" in the program
        self.program.swap_context(context)
        one = context.pop("one")
        self.program.swap_context(context)
        self.assertEqual(list(context), [])

        context["one"] = one
        self.program.swap_context(context)
        self.assertEqual(sorted(context), ["two"])
        self.assertEqual(context["two"], block_of_calls("turnleft", "move"))

    def test_swap_context_checks_entries(self):
        loop = Statement()
        loop.assemble_while(Condition.EQUAL, Statement())
        shared = Statement()
        for context in [{"move": Statement()}, {"bad name": Statement()},
                        {"ok": block_of_calls("x").remove_from_block(0)}, {"ok": loop},
                        {"one": shared, "two": shared}]:
            with self.assertRaises(ContractViolation):
                self.program.swap_context(context)
        self.assertEqual(self.program, Program())

    def test_swap_context_does_not_share_bodies(self):
        body = block_of_calls("move")
        context = {"walk": body}
        self.program.swap_context(context)
        self.assertEqual(body, Statement())

        # The old handle no longer reaches the program's context
        extra = Statement()
        extra.assemble_call("skip")
        body.add_to_block(0, extra)
        self.program.swap_context(context)
        self.assertIsNot(context["walk"], body)
        self.assertEqual(context["walk"], block_of_calls("move"))

    def test_swap_context_with_itself_is_a_no_op(self):
        context = {"walk": block_of_calls("move")}
        self.program.swap_context(context)
        self.program.swap_context(self.program._context)
        self.program.swap_context(context)
        self.assertEqual(context, {"walk": block_of_calls("move")})

    def test_swap_body(self):
        body = block_of_calls("a", "b")
        self.program.swap_body(body)
        self.assertEqual(body, Statement())
        self.program.swap_body(body)
        self.assertEqual(body, block_of_calls("a", "b"))

    def test_swap_body_requires_block(self):
        s = Statement()
        s.assemble_call("a")
        with self.assertRaises(ContractViolation):
            self.program.swap_body(s)
        self.assertEqual(s.kind(), Kind.CALL)

    def test_transfer_from(self):
        source = Program()
        source.set_name("Source")
        body = block_of_calls("x")
        source.swap_body(body)
        self.program.transfer_from(source)
        self.assertEqual(self.program.name(), "Source")
        self.assertEqual(source, Program())
        out = self.program.new_body()
        self.program.swap_body(out)
        self.assertEqual(out, block_of_calls("x"))

    def test_equality(self):
        other = Program()
        other.set_name("Other")
        self.assertNotEqual(self.program, other)
        self.program.set_name("Other")
        self.assertEqual(self.program, other)
        with self.assertRaises(ContractViolation):
            self.program.transfer_from(self.program)


if __name__ == '__main__':
    unittest.main()
