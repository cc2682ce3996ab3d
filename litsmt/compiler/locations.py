# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Optional, Union

from litsmt.exceptions import UnsupportedError
from litsmt.representation import LocationReg, LocationGlobal, LocationDeref, Symbolic, \
    Register, SymbolicLocation
from litsmt.utils.logger import Logger

def dump_location(loc)->str:
    if hasattr(loc, "dump"):
        return loc.dump()
    return str(loc)

def location_info(loc)->Optional[Union[Register, SymbolicLocation]]:
    '''
    Maps a parsed location to a thread register or a symbolic global.

    Indexed memory cells are not part of the record and map to None,
    every other kind of location is rejected.
    '''
    if isinstance(loc, LocationReg):
        return Register(loc.tid, loc.reg)

    if isinstance(loc, LocationGlobal) and isinstance(loc.value, Symbolic):
        return SymbolicLocation(loc.value.name)

    if isinstance(loc, LocationDeref):
        return None

    Logger.error("Register type in %s not supported by LitSMT"%(dump_location(loc)), exception=UnsupportedError)
