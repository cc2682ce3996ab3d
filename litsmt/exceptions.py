# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

class LitSMTError(RuntimeError):
    """Base class for the errors raised while converting a litmus test"""
    pass

class UnsupportedError(LitSMTError):
    """The test uses a construct that has no counterpart in the record"""
    pass

class OutputLookupError(LitSMTError):
    """A register has no output slot in the final state"""
    pass

class LitmusParseError(LitSMTError):
    """The litmus text is malformed"""
    pass
