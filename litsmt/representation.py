# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import List, Tuple

from pysmt.utils import quote

OUTPUT_PREFIX = "output"

class Term(object):
    '''
    Immutable value with structural equality.

    Subclasses list their attributes in _fields (and __slots__); two terms
    are equal only if they are instances of the same class with equal fields.
    '''
    __slots__ = ()
    _fields = ()

    def __init__(self, *values):
        assert len(values) == len(self._fields), \
            "%s expects %d fields but got %d"%(self.__class__.__name__, len(self._fields), len(values))
        for (field, value) in zip(self._fields, values):
            object.__setattr__(self, field, value)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable"%(self.__class__.__name__))

    def __reduce__(self):
        return (self.__class__, tuple(getattr(self, f) for f in self._fields))

    def _key(self):
        return (self.__class__.__name__,) + tuple(getattr(self, f) for f in self._fields)

    def __eq__(self, other):
        return (self.__class__ is other.__class__) and (self._key() == other._key())

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "%s(%s)"%(self.__class__.__name__, ", ".join([repr(getattr(self, f)) for f in self._fields]))


######################## Parsed constants ########################

class Concrete(Term):
    __slots__ = _fields = ("text",)

    def pretty(self):
        return self.text

class Symbolic(Term):
    __slots__ = _fields = ("name",)

    def pretty(self):
        return self.name

class Label(Term):
    __slots__ = _fields = ("proc", "label")

    def pretty(self):
        return "P%d:%s"%(self.proc, self.label)


######################## Parsed locations ########################

class LocationReg(Term):
    __slots__ = _fields = ("tid", "reg")

    def dump(self):
        return "%d:%s"%(self.tid, self.reg)

class LocationSReg(Term):
    __slots__ = _fields = ("name",)

    def dump(self):
        return "%%%s"%(self.name)

class LocationGlobal(Term):
    __slots__ = _fields = ("value",)

    def dump(self):
        return self.value.pretty()

class LocationDeref(Term):
    __slots__ = _fields = ("value", "offset")

    def dump(self):
        return "%s[%d]"%(self.value.pretty(), self.offset)


######################## Propositions ########################

class Atom(Term):
    __slots__ = _fields = ("location", "value")

class AtomLL(Term):
    __slots__ = _fields = ("left", "right")

class Not(Term):
    __slots__ = _fields = ("prop",)

class And(Term):
    __slots__ = _fields = ("props",)

    def __init__(self, props):
        Term.__init__(self, tuple(props))

class Or(Term):
    __slots__ = _fields = ("props",)

    def __init__(self, props):
        Term.__init__(self, tuple(props))

class Implies(Term):
    __slots__ = _fields = ("left", "right")

class ExistsState(Term):
    __slots__ = _fields = ("prop",)

class NotExistsState(Term):
    __slots__ = _fields = ("prop",)

class ForallStates(Term):
    __slots__ = _fields = ("prop",)


######################## Pseudo instructions ########################

class Instruction(Term):
    __slots__ = _fields = ("text",)

class Nop(Term):
    __slots__ = _fields = ()

class Labelled(Term):
    __slots__ = _fields = ("label", "pseudo")

class Macro(Term):
    __slots__ = _fields = ("name", "args")

    def __init__(self, name, args):
        Term.__init__(self, name, tuple(args))

class SymbolicPseudo(Term):
    __slots__ = _fields = ("text",)


class LitmusTest(Term):
    '''
    A parsed litmus test

    info is the ordered list of (key, value) pairs of the header,
    init the ordered list of (location, constant) assignments,
    prog the ordered list of (thread id, pseudo instructions)
    '''
    __slots__ = _fields = ("arch", "name", "info", "init", "prog", "condition", "doc")

    def __init__(self, arch, name, info, init, prog, condition, doc=None):
        Term.__init__(self, arch, name,
                      tuple([tuple(i) for i in info]),
                      tuple([tuple(i) for i in init]),
                      tuple([(tid, tuple(code)) for (tid, code) in prog]),
                      condition, doc)


######################## Resolved locations ########################

class Register(Term):
    __slots__ = _fields = ("tid", "name")

class SymbolicLocation(Term):
    __slots__ = _fields = ("name",)


######################## Initial state ########################

class RegisterValue(Term):
    __slots__ = _fields = ("value",)

    def __str__(self):
        return self.value

class LabelValue(Term):
    __slots__ = _fields = ("target",)

    def __str__(self):
        return "%s:"%(self.target)

class InitialState(Term):
    __slots__ = _fields = ("symbolic_values", "registers")

    def __init__(self, symbolic_values=(), registers=()):
        Term.__init__(self, frozenset(symbolic_values), tuple(registers))

    def sorted_symbolic_values(self)->List[str]:
        return sorted(self.symbolic_values)

    def thread_registers(self, tid:int)->List[Tuple[str, Term]]:
        return [(name, value) for (rtid, name, value) in self.registers if rtid == tid]


######################## S-expressions ########################

class SAtom(Term):
    __slots__ = _fields = ("text",)

    def __str__(self):
        return self.text

class SList(Term):
    __slots__ = _fields = ("items",)

    def __init__(self, items):
        Term.__init__(self, tuple(items))

    def __str__(self):
        return "(%s)"%(" ".join([str(i) for i in self.items]))


######################## Final state ########################

class SmtResult(object):
    SAT = "sat"
    UNSAT = "unsat"

class FinalState(Term):
    '''
    Compiled final state

    locations holds (thread id, output slot, register name) for every
    register referenced by the condition, in discovery order
    '''
    __slots__ = _fields = ("locations", "assertion", "expect")

    def __init__(self, locations, assertion, expect):
        Term.__init__(self, tuple(locations), assertion, expect)

    def quoted_slots(self)->List[str]:
        return [quote(slot) for (_, slot, _) in self.locations]


######################## Record ########################

class ThreadRecord(Term):
    __slots__ = _fields = ("tid", "init", "code")

    def __init__(self, tid, init, code):
        Term.__init__(self, tid, tuple(init), code)

class LitmusRecord(Term):
    __slots__ = _fields = ("arch", "name", "info", "symbolic", "threads", "final")

    def __init__(self, arch, name, info, symbolic, threads, final):
        Term.__init__(self, arch, name, tuple(info), tuple(symbolic), tuple(threads), final)
