# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from litsmt.printers.template import RecordPrinter
from litsmt.representation import LitmusRecord
from litsmt.utils.generic import quote_string, lowercase_ascii

NL = "\n"
CODE_DELIM = "\"\"\""

class TOMLRecordPrinter(RecordPrinter):
    EXT  = ".toml"

    def __init__(self):
        RecordPrinter.__init__(self)
        self.write = self.stream.write

    def print_record(self, record:LitmusRecord)->str:
        self.__print_pair("arch", record.arch)
        self.__print_pair("name", record.name)

        for (key, value) in record.info:
            self.__print_pair(lowercase_ascii(key), value)

        self.write("symbolic = [%s]%s"%(", ".join([quote_string(s) for s in record.symbolic]), NL))

        for thread in record.threads:
            self.write("%s[thread.%d]%s"%(NL, thread.tid, NL))
            init = ", ".join(["%s = \"%s\""%(reg, value) for (reg, value) in thread.init])
            self.write("init = { %s }%s"%(init, NL))
            self.write("code = %s%s%s%s%s"%(CODE_DELIM, NL, thread.code, CODE_DELIM, NL))

        self.write("%s[final]%s"%(NL, NL))
        self.__print_pair("expect", record.final.expect)
        self.__print_pair("assertion", str(record.final.assertion))

        return self._flush()

    def __print_pair(self, key, value):
        self.write("%s = %s%s"%(key, quote_string(value), NL))
