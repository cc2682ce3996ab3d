# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from io import StringIO

import pytest

from litsmt.exceptions import UnsupportedError
from litsmt.printers.record import TOMLRecordPrinter
from litsmt.representation import Concrete, Symbolic, Label, LocationReg, LocationGlobal, \
    Atom, AtomLL, And, ExistsState, ForallStates, Instruction, Nop, Labelled, Macro, \
    SymbolicPseudo, LitmusTest
from litsmt.translator import string_of_pseudo, string_of_pseudo_list, translate, translate_to_string
from litsmt.utils.generic import escape, quote_string
from litsmt.utils.logger import Logger

def mp_test(condition=None):
    if condition is None:
        condition = ExistsState(And([Atom(LocationReg(1, "X0"), Concrete("1")),
                                     Atom(LocationReg(1, "X2"), Concrete("0"))]))
    init = [(LocationReg(0, "X1"), Symbolic("x")),
            (LocationReg(0, "X3"), Symbolic("y")),
            (LocationReg(1, "X1"), Symbolic("y")),
            (LocationReg(1, "X3"), Symbolic("x"))]
    prog = [(0, [Instruction("MOV W0,#1"), Instruction("STR W0,[X1]")]),
            (1, [Labelled("L0", Instruction("LDR W0,[X1]")), Nop(), Instruction("LDR W2,[X3]")])]
    return LitmusTest("AArch64", "MP", [("Hash", "a\"b")], init, prog, condition)

MP_RECORD = \
    'arch = "AArch64"\n' \
    'name = "MP"\n' \
    'hash = "a\\"b"\n' \
    'symbolic = ["x", "y"]\n' \
    '\n' \
    '[thread.0]\n' \
    'init = { X1 = "x", X3 = "y" }\n' \
    'code = """\n' \
    '\tMOV W0,#1\n' \
    '\tSTR W0,[X1]\n' \
    '"""\n' \
    '\n' \
    '[thread.1]\n' \
    'init = { X1 = "y", X3 = "x" }\n' \
    'code = """\n' \
    'L0:\n' \
    '\tLDR W0,[X1]\n' \
    '\tLDR W2,[X3]\n' \
    '"""\n' \
    '\n' \
    '[final]\n' \
    'expect = "sat"\n' \
    'assertion = "(and (= (register X0 1) 1) (= (register X2 1) 0))"\n'

def test_escape():
    assert escape("MOV W0,#1") == "MOV W0,#1"
    assert escape("a\"b\\c") == "a\\\"b\\\\c"
    assert escape("\n\t\r\b") == "\\n\\t\\r\\b"
    assert escape("\x01\x7f") == "\\001\\127"
    assert escape("é") == "\\195\\169"
    assert quote_string("") == "\"\""

def test_string_of_pseudo():
    assert string_of_pseudo(Instruction("ADD X0,X0,#1")) == "\tADD X0,X0,#1\n"
    assert string_of_pseudo(Nop()) == ""
    assert string_of_pseudo(Labelled("L1", Nop())) == "L1:\n"
    assert string_of_pseudo(Labelled("L1", Labelled("L2", Instruction("B L1")))) == "L1:\nL2:\n\tB L1\n"
    assert string_of_pseudo(Instruction("MOV \"x\"")) == "\tMOV \\\"x\\\"\n"
    assert string_of_pseudo_list([]) == ""

def test_macro_rejected():
    with pytest.raises(UnsupportedError) as e:
        string_of_pseudo_list([Instruction("NOP"), Macro("m", ["X0"])])
    assert str(e.value) == "Macro or Symbolic instruction found in litmus file"

    with pytest.raises(UnsupportedError):
        string_of_pseudo(SymbolicPseudo("x"))

def test_translate():
    record = translate(mp_test())
    assert record.symbolic == ("x", "y")
    assert [t.tid for t in record.threads] == [0, 1]
    assert record.threads[1].init == (("X1", "y"), ("X3", "x"))
    assert record.final.expect == "sat"

def test_record_output():
    assert translate_to_string(mp_test()) == MP_RECORD

def test_record_printer_reuse():
    printer = TOMLRecordPrinter()
    record = translate(mp_test())
    assert printer.print_record(record) == MP_RECORD
    assert printer.print_record(record) == MP_RECORD
    assert printer.get_file_ext() == ".toml"

def test_record_empty_init():
    test = LitmusTest("X86", "Empty", [], [], [(0, [Instruction("MFENCE")])],
                      ForallStates(And([Atom(LocationGlobal(Symbolic("x")), Concrete("0"))])))
    expected = \
        'arch = "X86"\n' \
        'name = "Empty"\n' \
        'symbolic = []\n' \
        '\n' \
        '[thread.0]\n' \
        'init = {  }\n' \
        'code = """\n' \
        '\tMFENCE\n' \
        '"""\n' \
        '\n' \
        '[final]\n' \
        'expect = "unsat"\n' \
        'assertion = "(not (and (= (last_write_to x) 0)))"\n'
    assert translate_to_string(test) == expected

def test_record_label_init():
    test = LitmusTest("AArch64", "BR", [], [(LocationReg(0, "X0"), Label(0, "L0"))],
                      [(0, [Instruction("BR X0"), Labelled("L0", Nop())])],
                      ExistsState(Atom(LocationReg(0, "X0"), Concrete("1"))))
    record = translate_to_string(test)
    assert 'init = { X0 = "L0:" }\n' in record
    assert 'code = """\n\tBR X0\nL0:\n"""\n' in record

def test_no_partial_output():
    test = mp_test(ExistsState(AtomLL(LocationReg(0, "X0"), LocationReg(1, "X0"))))
    with pytest.raises(UnsupportedError):
        translate_to_string(test)

def test_translate_logs_slots(monkeypatch):
    stream = StringIO()
    monkeypatch.setattr(Logger, "stream", stream)
    monkeypatch.setattr(Logger, "verbosity", 2)
    translate(mp_test())
    assert "Test \"MP\": outputs [|output 0|, |output 1|], expecting sat\n" in stream.getvalue()
