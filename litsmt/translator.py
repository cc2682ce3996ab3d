# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Sequence

from litsmt.compiler.final_state import process_final_state
from litsmt.compiler.initial_state import process_initial_state
from litsmt.exceptions import UnsupportedError
from litsmt.printers.record import TOMLRecordPrinter
from litsmt.representation import Instruction, Nop, Labelled, Macro, SymbolicPseudo, \
    LitmusTest, LitmusRecord, ThreadRecord
from litsmt.utils.generic import escape
from litsmt.utils.logger import Logger

def string_of_pseudo(pseudo)->str:
    if isinstance(pseudo, Instruction):
        return "\t%s\n"%(escape(pseudo.text))

    if isinstance(pseudo, Nop):
        return ""

    if isinstance(pseudo, Labelled):
        return "%s:\n%s"%(pseudo.label, string_of_pseudo(pseudo.pseudo))

    if isinstance(pseudo, (Macro, SymbolicPseudo)):
        Logger.error("Macro or Symbolic instruction found in litmus file", exception=UnsupportedError)

    Logger.error("Unexpected pseudo instruction %s"%(repr(pseudo)), exception=UnsupportedError)

def string_of_pseudo_list(code:Sequence)->str:
    return "".join([string_of_pseudo(p) for p in code])

def translate(test:LitmusTest)->LitmusRecord:
    '''
    Builds the record of a litmus test, raises a LitSMTError on the first
    unsupported construct
    '''
    istate = process_initial_state(test.init)

    threads = []
    for (tid, code) in test.prog:
        init = [(reg, str(value)) for (reg, value) in istate.thread_registers(tid)]
        threads.append(ThreadRecord(tid, init, string_of_pseudo_list(code)))

    final = process_final_state(test.condition)
    Logger.log("Test \"%s\": outputs [%s], expecting %s"%(test.name, ", ".join(final.quoted_slots()), final.expect), 1)

    return LitmusRecord(test.arch, test.name, test.info, istate.sorted_symbolic_values(), threads, final)

def translate_to_string(test:LitmusTest)->str:
    return TOMLRecordPrinter().print_record(translate(test))
