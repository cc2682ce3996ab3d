# Copyright 2018 Cristian Mattarei
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

ESCAPES = {ord('"'): '\\"',
           ord('\\'): '\\\\',
           ord('\n'): '\\n',
           ord('\t'): '\\t',
           ord('\r'): '\\r',
           ord('\b'): '\\b'}

def escape(string):
    '''
    Escapes a string for a double quoted value

    Printable ASCII is kept, quotes, backslashes and the usual control
    characters use their backslash form, every other byte of the UTF-8
    encoding is written as a three digit decimal escape
    '''
    ret = []
    for byte in string.encode("utf-8"):
        if byte in ESCAPES:
            ret.append(ESCAPES[byte])
        elif 32 <= byte <= 126:
            ret.append(chr(byte))
        else:
            ret.append("\\%03d"%byte)
    return "".join(ret)

def quote_string(string):
    return "\"%s\""%(escape(string))

def lowercase_ascii(string):
    return "".join([c.lower() if c.isascii() else c for c in string])

def class_name(obj):
    return obj.__class__.__name__

def file_basename(strfile):
    return os.path.splitext(os.path.basename(strfile))[0]

class color:
   BOLD = '\033[1m'
   END = '\033[0m'

def bold_text(text):
    return color.BOLD + text + color.END
