# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import List, Sequence, Tuple, Union

from litsmt.compiler.locations import location_info
from litsmt.exceptions import UnsupportedError, OutputLookupError
from litsmt.representation import Atom, AtomLL, Not, And, Or, Implies, \
    ExistsState, NotExistsState, ForallStates, Concrete, Register, SymbolicLocation, \
    SAtom, SList, SmtResult, FinalState, OUTPUT_PREFIX
from litsmt.utils.logger import Logger

REGISTER = "register"
LAST_WRITE_TO = "last_write_to"

T_EQ = "="
T_NOT = "not"
T_AND = "and"
T_OR = "or"
T_IMPL = "=>"

def _atom_locations(prop):
    if isinstance(prop, Atom):
        yield prop.location
    elif isinstance(prop, AtomLL):
        yield prop.left
        yield prop.right
    elif isinstance(prop, Not):
        yield from _atom_locations(prop.prop)
    elif isinstance(prop, (And, Or)):
        for p in prop.props:
            yield from _atom_locations(p)
    elif isinstance(prop, Implies):
        yield from _atom_locations(prop.left)
        yield from _atom_locations(prop.right)
    else:
        Logger.error("Unexpected proposition %s"%(repr(prop)), exception=UnsupportedError)

def prop_locations(prop)->List[Union[Register, SymbolicLocation]]:
    '''
    Returns the distinct locations referenced by the proposition, in
    depth-first, left-to-right order of first occurrence
    '''
    locs = []
    for loc in _atom_locations(prop):
        info = location_info(loc)
        if (info is not None) and (info not in locs):
            locs.append(info)
    return locs

def output_slot(n:int)->str:
    return "%s %d"%(OUTPUT_PREFIX, n)

def final_locations(locs:Sequence[Union[Register, SymbolicLocation]])->List[Tuple[int, str, str]]:
    registers = [l for l in locs if isinstance(l, Register)]
    return [(reg.tid, output_slot(n), reg.name) for (n, reg) in enumerate(registers)]

def lookup_location(locations:Sequence[Tuple[int, str, str]], tid:int, reg_name:str)->str:
    for (ltid, slot, lreg_name) in locations:
        if (ltid == tid) and (lreg_name == reg_name):
            return slot

    Logger.error("Could not find output id for register %d:%s"%(tid, reg_name), exception=OutputLookupError)

def compile_location(loc)->SList:
    info = location_info(loc)

    if isinstance(info, Register):
        return SList([SAtom(REGISTER), SAtom(info.name), SAtom(str(info.tid))])

    if isinstance(info, SymbolicLocation):
        return SList([SAtom(LAST_WRITE_TO), SAtom(info.name)])

    Logger.error("Invalid location in final state", exception=UnsupportedError)

def compile_value(value)->SAtom:
    if isinstance(value, Concrete):
        return SAtom(value.text)

    Logger.error("Failed to compile value to SMT in litmus assertion", exception=UnsupportedError)

def compile_prop(prop):
    if isinstance(prop, Atom):
        return SList([SAtom(T_EQ), compile_location(prop.location), compile_value(prop.value)])

    if isinstance(prop, AtomLL):
        Logger.error("LL atom not yet supported", exception=UnsupportedError)

    if isinstance(prop, Not):
        return SList([SAtom(T_NOT), compile_prop(prop.prop)])

    if isinstance(prop, And):
        return SList([SAtom(T_AND)] + [compile_prop(p) for p in prop.props])

    if isinstance(prop, Or):
        return SList([SAtom(T_OR)] + [compile_prop(p) for p in prop.props])

    if isinstance(prop, Implies):
        return SList([SAtom(T_IMPL), compile_prop(prop.left), compile_prop(prop.right)])

    Logger.error("Unexpected proposition %s"%(repr(prop)), exception=UnsupportedError)

def _default_state(prop, expect):
    locations = final_locations(prop_locations(prop))
    return FinalState(locations, compile_prop(prop), expect)

def process_final_state(condition)->FinalState:
    '''
    Compiles the quantified final condition.

    exists p holds if p is satisfiable; ~exists p and forall p are checked
    as unsatisfiability queries, of p and of (not p) respectively
    '''
    if isinstance(condition, ExistsState):
        return _default_state(condition.prop, SmtResult.SAT)

    if isinstance(condition, NotExistsState):
        return _default_state(condition.prop, SmtResult.UNSAT)

    if isinstance(condition, ForallStates):
        state = _default_state(condition.prop, SmtResult.UNSAT)
        return FinalState(state.locations, SList([SAtom(T_NOT), state.assertion]), SmtResult.UNSAT)

    Logger.error("Unexpected final state condition %s"%(repr(condition)), exception=UnsupportedError)
