# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import re

from pyparsing import Word, Literal, Keyword, Regex, Suppress, Opt, QuotedString, StringEnd, \
    ParseException, alphas, alphanums, nums, printables, rest_of_line, nested_expr, infix_notation, OpAssoc

from litsmt.encoders.template import InputParser
from litsmt.exceptions import LitmusParseError
from litsmt.representation import Concrete, Symbolic, Label, LocationReg, LocationSReg, LocationGlobal, \
    LocationDeref, Atom, AtomLL, Not, And, Or, Implies, ExistsState, NotExistsState, ForallStates, \
    Instruction, Nop, Labelled, LitmusTest
from litsmt.utils.logger import Logger

T_NL = "\n"
T_EQ = "="
T_US = "_"
T_DOT = "."
T_CL = ":"
T_SC = ";"
T_BAR = "|"
T_PERC = "%"
T_LB = "["
T_RB = "]"
T_LC = "{"
T_RC = "}"
T_QUOTE = "\""

T_NOT = "~"
T_AND = "/\\"
T_OR = "\\/"
T_IMPL = "=>"
T_TRUE = "true"
T_FALSE = "false"

T_EXISTS = "exists"
T_NOT_EXISTS = "~exists"
T_FORALL = "forall"
T_LOCATIONS = "locations"

P_ARCH = "arch"
P_NAME = "name"
P_KEY = "key"
P_VALUE = "value"
P_PROC = "proc"
P_LABEL = "label"
P_INSTR = "instr"
P_TID = "tid"
P_QUANT = "quantifier"

CONDITION_START = re.compile(r"^(%s|~\s*%s|%s|%s)\b"%(T_EXISTS, T_EXISTS, T_FORALL, T_LOCATIONS))

def _ident():
    return Word(alphas+T_US, alphanums+T_US+T_DOT)

def _fold_not(tokens):
    tokens = list(tokens[0])
    prop = tokens[-1]
    for _ in tokens[:-1]:
        prop = Not(prop)
    return prop

def _fold_implies(tokens):
    operands = list(tokens[0])[0::2]
    prop = operands[-1]
    for left in reversed(operands[:-1]):
        prop = Implies(left, prop)
    return prop

def _make_atom(tokens):
    (loc, rhs) = (tokens[0], tokens[1])
    if isinstance(rhs, (LocationReg, LocationSReg, LocationGlobal)):
        return AtomLL(loc, rhs)
    return Atom(loc, rhs)

def _make_condition(tokens):
    (quantifier, prop) = (tokens[0], tokens[1])
    if quantifier == T_EXISTS:
        return ExistsState(prop)
    if quantifier == T_NOT_EXISTS:
        return NotExistsState(prop)
    return ForallStates(prop)

class LitmusParser(InputParser):
    '''
    Reader for herd style litmus tests

    AArch64 MP
    "optional documentation"
    Key=Value
    { 0:X1=x; 1:X1=y; }
     P0          | P1          ;
     STR W0,[X1] | LDR W0,[X1] ;
    exists (1:X0=1 /\ 1:X2=0)
    '''

    extensions = ["litmus"]

    def __init__(self):
        self.__init_parser()

    @staticmethod
    def get_extensions():
        return LitmusParser.extensions

    def __init_parser(self):
        self.comment = Regex(r"\(\*.*?\*\)", flags=re.DOTALL)

        self.header = Word(printables)(P_ARCH) + rest_of_line(P_NAME)
        self.doc = QuotedString(T_QUOTE, esc_char="\\")
        self.info = Word(alphanums+T_US+"-")(P_KEY) + Suppress(T_EQ) + rest_of_line(P_VALUE)

        # values
        number = Regex(r"-?(0x[0-9a-fA-F]+|[0-9]+)")
        concrete = number.copy().set_parse_action(lambda t: Concrete(t[0]))
        label = Regex(r"P(?P<%s>[0-9]+):(?P<%s>[A-Za-z_.][A-Za-z0-9_.]*)"%(P_PROC, P_LABEL))
        label.set_parse_action(lambda t: Label(int(t[P_PROC]), t[P_LABEL]))
        symbolic = _ident().set_parse_action(lambda t: Symbolic(t[0]))
        value = label | concrete | symbolic

        # locations
        tid = Word(nums).set_parse_action(lambda t: int(t[0]))
        reg_loc = (tid + Suppress(T_CL) + Word(alphas+T_US, alphanums+T_US)).set_parse_action(lambda t: LocationReg(t[0], t[1]))
        sreg_loc = (Suppress(T_PERC) + _ident()).set_parse_action(lambda t: LocationSReg(t[0]))
        address = number.copy().set_parse_action(lambda t: Concrete(t[0])) | _ident().set_parse_action(lambda t: Symbolic(t[0]))
        bracket_loc = (Suppress(T_LB) + address + Suppress(T_RB)).set_parse_action(lambda t: LocationGlobal(t[0]))
        deref_loc = (_ident() + Suppress(T_LB) + Word(nums) + Suppress(T_RB)).set_parse_action(lambda t: LocationDeref(Symbolic(t[0]), int(t[1])))
        global_loc = _ident().set_parse_action(lambda t: LocationGlobal(Symbolic(t[0])))
        location = reg_loc | sreg_loc | bracket_loc | deref_loc | global_loc

        # initial state: [type] location = value
        ctype = _ident() + ~(Literal(T_EQ) | Literal(T_LB))
        self.assignment = Suppress(Opt(ctype)) + location + Suppress(T_EQ) + value + StringEnd()

        # thread table
        self.thread = Regex(r"P(?P<%s>[0-9]+)"%(P_TID)) + StringEnd()
        self.cell = Opt(Regex(r"(?P<%s>[A-Za-z_.][A-Za-z0-9_.]*):(?!:)"%(P_LABEL))) + rest_of_line(P_INSTR)

        # final condition
        rhs_loc = reg_loc | sreg_loc | bracket_loc
        atom = (location + Suppress(T_EQ) + (rhs_loc | value)).set_parse_action(_make_atom)
        true = Keyword(T_TRUE).set_parse_action(lambda t: And([]))
        false = Keyword(T_FALSE).set_parse_action(lambda t: Or([]))

        prop = infix_notation(true | false | atom,
                              [(Literal(T_NOT), 1, OpAssoc.RIGHT, _fold_not),
                               (Literal(T_AND), 2, OpAssoc.LEFT, lambda t: And(list(t[0])[0::2])),
                               (Literal(T_OR), 2, OpAssoc.LEFT, lambda t: Or(list(t[0])[0::2])),
                               (Literal(T_IMPL), 2, OpAssoc.RIGHT, _fold_implies)])

        not_exists = Regex(r"~\s*%s\b"%(T_EXISTS)).set_parse_action(lambda t: T_NOT_EXISTS)
        quantifier = (not_exists | Keyword(T_EXISTS) | Keyword(T_FORALL))(P_QUANT)
        locations = Keyword(T_LOCATIONS) + nested_expr(T_LB, T_RB)

        self.condition = (Suppress(Opt(locations)) + quantifier + prop + StringEnd()).set_parse_action(_make_condition)

    def parse_file(self, strfile):
        try:
            with open(strfile, "r", encoding="utf-8") as f:
                strinput = f.read()
        except UnicodeDecodeError as e:
            Logger.error("%s: %s"%(strfile, e), exception=LitmusParseError)

        return self.parse_string(strinput, strfile)

    def parse_string(self, strinput, source=None):
        if source is None:
            source = "<string>"

        try:
            return self.__parse(strinput, source)
        except ParseException as e:
            Logger.error("%s: %s"%(source, e), exception=LitmusParseError)

    def __parse(self, strinput, source):
        lines = self.comment.suppress().transform_string(strinput).split(T_NL)
        lines = [l.strip() for l in lines]

        idx = self.__skip_empty(lines, 0)
        if idx >= len(lines):
            Logger.error("%s: empty litmus test"%(source), exception=LitmusParseError)

        header = self.header.parse_string(lines[idx], parse_all=True)
        arch = header[P_ARCH]
        name = header.get(P_NAME, "").strip()
        if not name:
            Logger.error("%s: missing test name in \"%s\""%(source, lines[idx]), exception=LitmusParseError)
        idx = self.__skip_empty(lines, idx+1)

        doc = None
        if (idx < len(lines)) and lines[idx].startswith(T_QUOTE):
            doc = self.doc.parse_string(lines[idx], parse_all=True)[0]
            idx = self.__skip_empty(lines, idx+1)

        info = []
        while (idx < len(lines)) and not lines[idx].startswith(T_LC):
            if lines[idx]:
                pinfo = self.info.parse_string(lines[idx], parse_all=True)
                info.append((pinfo[P_KEY], pinfo.get(P_VALUE, "").strip()))
            idx += 1

        rest = T_NL.join(lines[idx:])
        if (not rest.startswith(T_LC)) or (T_RC not in rest):
            Logger.error("%s: missing initial state"%(source), exception=LitmusParseError)

        init = self.__parse_init(rest[1:rest.index(T_RC)])
        (prog, condition_text) = self.__parse_prog(rest[rest.index(T_RC)+1:].split(T_NL), source)

        if not condition_text:
            Logger.error("%s: missing final condition"%(source), exception=LitmusParseError)

        condition = self.condition.parse_string(condition_text, parse_all=True)[0]

        Logger.log("Parsed litmus test \"%s\" with %d thread(s)"%(name, len(prog)), 2)
        return LitmusTest(arch, name, info, init, prog, condition, doc)

    def __skip_empty(self, lines, idx):
        while (idx < len(lines)) and not lines[idx]:
            idx += 1
        return idx

    def __parse_init(self, strinit):
        init = []
        for strassign in strinit.split(T_SC):
            strassign = strassign.strip()
            if not strassign:
                continue
            passign = self.assignment.parse_string(strassign, parse_all=True)
            init.append((passign[0], passign[1]))
        return init

    def __split_row(self, line):
        if line.endswith(T_SC):
            line = line[:-1]
        return [c.strip() for c in line.split(T_BAR)]

    def __parse_prog(self, lines, source):
        tids = None
        codes = None

        idx = 0
        while idx < len(lines):
            line = lines[idx].strip()
            if CONDITION_START.match(line):
                break
            idx += 1
            if not line:
                continue

            cells = self.__split_row(line)
            if tids is None:
                tids = [int(self.thread.parse_string(c, parse_all=True)[P_TID]) for c in cells]
                codes = [[] for _ in tids]
                continue

            if len(cells) > len(tids):
                Logger.error("%s: too many instructions in row \"%s\""%(source, line), exception=LitmusParseError)

            for (i, cell) in enumerate(cells):
                if cell:
                    codes[i].append(self.__parse_cell(cell))

        if tids is None:
            Logger.error("%s: missing thread table"%(source), exception=LitmusParseError)

        return (list(zip(tids, codes)), T_NL.join(lines[idx:]).strip())

    def __parse_cell(self, cell):
        pcell = self.cell.parse_string(cell, parse_all=True)
        instr = pcell.get(P_INSTR, "").strip()
        pseudo = Instruction(instr) if instr else Nop()
        if P_LABEL in pcell:
            return Labelled(pcell[P_LABEL], pseudo)
        return pseudo
