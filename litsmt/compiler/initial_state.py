# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Sequence, Tuple

from litsmt.compiler.locations import location_info, dump_location
from litsmt.exceptions import UnsupportedError
from litsmt.representation import Concrete, Symbolic, Label, SymbolicLocation, \
    RegisterValue, LabelValue, InitialState
from litsmt.utils.logger import Logger

def register_value(value):
    if isinstance(value, Symbolic):
        return RegisterValue(value.name)
    if isinstance(value, Concrete):
        return RegisterValue(value.text)
    if isinstance(value, Label):
        return LabelValue(value.label)

    Logger.error("Unexpected initial value %s"%(repr(value)), exception=UnsupportedError)

def process_initial_state(init:Sequence[Tuple[object, object]])->InitialState:
    '''
    Folds the initial assignments into the set of symbolic values and the
    list of register initializers.

    Every assignment is kept in input order, a register assigned twice
    appears twice.
    '''
    symbolic_values = set([])
    registers = []

    for (loc, value) in init:
        info = location_info(loc)

        if info is None:
            Logger.log("Dropping initial assignment to %s"%(dump_location(loc)), 2)
            continue

        if isinstance(info, SymbolicLocation):
            Logger.error("Symbolic location not supported in initial state", exception=UnsupportedError)

        if isinstance(value, Symbolic):
            symbolic_values.add(value.name)

        registers.append((info.tid, info.name, register_value(value)))

    return InitialState(symbolic_values, registers)
