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

from litsmt.utils.logger import Logger

class RecordPrinter(object):
    EXT  = ".none"

    def __init__(self):
        self.stream = StringIO()

    def print_record(self, record):
        Logger.error("Not implemented")

    def get_file_ext(self):
        return self.EXT

    def _flush(self):
        ret = self.stream.getvalue()
        self.stream.truncate(0)
        self.stream.seek(0)
        return ret
