# Copyright 2018 Stanford University
#
# Licensed under the modified BSD (3-clause BSD) License.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from argparse import RawTextHelpFormatter

from litsmt.config import LitSMTArgParser, file_list
from litsmt.encoders.litmus import LitmusParser
from litsmt.utils.generic import bold_text

__all__ = ['litsmt_option_manager']

##########################################################################################
#                     LitSMT Command Line Arguments and Configuration File               #
##########################################################################################
#
#     Every option can be given on the command line or in the [GENERAL] section of a
#       configuration file passed with --config, using the long option name with dashes
#       replaced by underscores (e.g. --output-dir is output_dir)
#
#     Priority order:
#       command line argument > configuration file > built in default
#
#########################################################################################
#     EXAMPLE
#
#     [GENERAL]
#     inputs: tests/MP.litmus,tests/SB.litmus
#     output_dir: records
#     keep_going: True
#
#     EXAMPLE END
########################################################################################

CONFIG_FILE_INFO="""
Every option can also be set in the [GENERAL] section of a configuration file
passed with --config. Use the long option name with dashes replaced by underscores.

The following priority order is maintained:
      command line argument > configuration file > built in default
"""

litsmt_option_manager = LitSMTArgParser(description=bold_text('LitSMT: litmus tests for SMT-based checkers'),
                                        formatter_class=RawTextHelpFormatter,
                                        epilog=CONFIG_FILE_INFO)

in_options = litsmt_option_manager.add_general_group('input options')

in_options.set_defaults(inputs=[])
in_options.add_argument('inputs', metavar='<litmus files>', nargs='*', type=file_list,
                        help='litmus tests to translate (%s).'%(", ".join(["*.%s"%e for e in LitmusParser.get_extensions()])))

in_options.set_defaults(config=None)
in_options.add_argument('--config', metavar='<config file>', type=str, required=False,
                        help='configuration file providing default option values.',
                        is_config_file=True)

out_options = litsmt_option_manager.add_general_group('output options')

out_options.set_defaults(output=None)
out_options.add_argument('-o', '--output', metavar='<file>', type=str, required=False,
                         help='writes the records to a file instead of the standard output.')

out_options.set_defaults(output_dir=None)
out_options.add_argument('--output-dir', metavar='<directory>', type=str, required=False,
                         help='writes one record per test in the given directory.')

run_options = litsmt_option_manager.add_general_group('run options')

run_options.set_defaults(keep_going=False)
run_options.add_argument('--keep-going', action='store_true',
                         help='skips tests that cannot be translated instead of stopping. (Default is \"%s\")'%False)

run_options.set_defaults(processes=1)
run_options.add_argument('-j', '--processes', metavar='<number>', type=int, required=False,
                         help='number of worker processes. (Default is \"%s\")'%1)

run_options.set_defaults(verbosity=1)
run_options.add_argument('-v', '--verbosity', metavar='<integer level>', type=int, required=False,
                         help='verbosity level. (Default is \"%s\")'%1)

run_options.set_defaults(time=False)
run_options.add_argument('--time', action='store_true',
                         help='prints time for every translation. (Default is \"%s\")'%False)
